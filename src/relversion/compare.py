"""Comparison helpers that accept version strings as well as Versions."""

from collections.abc import Iterable
from typing import cast

from .types import Ordering, VersionLike, VersionTuple
from .version import Version


def _coerce(version: VersionLike) -> Version:
    return Version.parse(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> Ordering:
    """Compare two versions.

    Args:
        version1: First version (string or Version).
        version2: Second version (string or Version).

    Returns:
        -1 if version1 < version2, 0 if equal, 1 if version1 > version2.

    Raises:
        VersionFormatError: If either version string is invalid.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0", "1.0.0")
        0
        >>> compare_versions("1.0.0", "0.9.9")
        1
    """
    return cast(Ordering, _coerce(version1).compare(_coerce(version2)))


def is_compatible(version1: VersionLike, version2: VersionLike) -> bool:
    """Check whether two versions share major and minor numbers.

    Raises:
        VersionFormatError: If either version string is invalid.
    """
    return _coerce(version1).is_compatible_with(_coerce(version2))


def version_key(version: VersionLike) -> VersionTuple:
    """Return a sort key for a version.

    Examples:
        >>> sorted(["1.10.0", "1.2.0", "0.9.9"], key=version_key)
        ['0.9.9', '1.2.0', '1.10.0']
    """
    return _coerce(version).as_tuple()


def sort_versions(
    versions: Iterable[VersionLike], reverse: bool = False
) -> list[Version]:
    """Parse and sort versions.

    Args:
        versions: Version strings or Versions, in any order.
        reverse: If True, sort from newest to oldest.

    Returns:
        Sorted list of Versions.

    Raises:
        VersionFormatError: On the first invalid version string.
    """
    return sorted((_coerce(v) for v in versions), reverse=reverse)
