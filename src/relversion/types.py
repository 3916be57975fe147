"""Type aliases needed in the package."""

from typing import Literal, TypeAlias

from .version import Version

Ordering: TypeAlias = Literal[-1, 0, 1]
VersionLike: TypeAlias = str | Version
VersionTuple: TypeAlias = tuple[int, int, int]
