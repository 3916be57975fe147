"""relversion - a major.minor.patch version value type.

Parses, formats, orders and serializes three-component release versions,
and plugs into Pydantic models as a plain string scalar.
"""

from ._version import __version__
from .compare import compare_versions, is_compatible, sort_versions, version_key
from .exceptions import (
    ComponentCountError,
    ComponentValueError,
    VersionFormatError,
)
from .types import Ordering, VersionLike, VersionTuple
from .version import (
    MAX_COMPONENT,
    Version,
    VersionAdapter,
    current_version,
    parse_version,
)

__all__ = [
    "MAX_COMPONENT",
    "ComponentCountError",
    "ComponentValueError",
    "Ordering",
    "Version",
    "VersionAdapter",
    "VersionFormatError",
    "VersionLike",
    "VersionTuple",
    "__version__",
    "compare_versions",
    "current_version",
    "is_compatible",
    "parse_version",
    "sort_versions",
    "version_key",
]
