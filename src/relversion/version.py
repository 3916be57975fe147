"""The version value type."""

import re
from dataclasses import dataclass
from typing import Any, Self

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler, TypeAdapter
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import PydanticCustomError, core_schema

from ._version import __version__
from .exceptions import ComponentCountError, ComponentValueError, VersionFormatError

MAX_COMPONENT = 2**32 - 1
VERSION_PATTERN = r"^[0-9]+\.[0-9]+\.[0-9]+$"

_COMPONENT_COUNT = 3
_COMPONENT_RE = re.compile(r"[0-9]+")
_FIELDS = ("major", "minor", "patch")


def _parse_component(version_str: str, part: str) -> int:
    """Parse a single dot-separated component.

    Only ASCII digits are accepted, which rules out signs, whitespace and the
    underscores that ``int()`` would otherwise tolerate.
    """
    if _COMPONENT_RE.fullmatch(part) is None:
        raise ComponentValueError(version_str, part)
    value = int(part)
    if value > MAX_COMPONENT:
        raise ComponentValueError(version_str, part)
    return value


@dataclass(frozen=True, order=True)
class Version:
    """Semantic version representation.

    Ordering is lexicographic over ``(major, minor, patch)``.

    Attributes:
        major: Major version number (breaking changes).
        minor: Minor version number (backward-compatible features).
        patch: Patch version number (backward-compatible fixes).
    """

    major: int
    minor: int
    patch: int

    def __post_init__(self: Self) -> None:
        """Validate the components.

        Raises:
            TypeError: If a component is not an int.
            ValueError: If a component is outside the unsigned 32-bit range.
        """
        for name in _FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if not 0 <= value <= MAX_COMPONENT:
                raise ValueError(
                    f"{name} must be between 0 and {MAX_COMPONENT}, got {value}"
                )

    @classmethod
    def parse(cls, version_str: str) -> Self:
        """Parse a version string.

        Args:
            version_str: Version string in format "major.minor.patch".

        Returns:
            Parsed Version instance.

        Raises:
            TypeError: If version_str is not a string.
            ComponentCountError: If the string does not have three components.
            ComponentValueError: If a component is not an unsigned integer. Only
                the first offending component is reported.

        Example:
            >>> Version.parse("1.2.3")
            Version(1, 2, 3)
        """
        if not isinstance(version_str, str):
            raise TypeError(
                f"Version must be a string, got {type(version_str).__name__}"
            )

        parts = version_str.split(".")
        if len(parts) != _COMPONENT_COUNT:
            raise ComponentCountError(version_str, len(parts), _COMPONENT_COUNT)

        major, minor, patch = (_parse_component(version_str, p) for p in parts)
        return cls(major, minor, patch)

    def is_compatible_with(self: Self, other: Self) -> bool:
        """Check whether two versions share an interface.

        Versions are compatible when major and minor match; patch is ignored.

        Args:
            other: Version to check against.

        Returns:
            True if the versions are compatible.
        """
        return self.major == other.major and self.minor == other.minor

    def compare(self: Self, other: Self) -> int:
        """Compare against another version.

        Args:
            other: Version to compare against.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other.
        """
        if self == other:
            return 0
        return -1 if self < other else 1

    def as_tuple(self: Self) -> tuple[int, int, int]:
        """Return the components as a (major, minor, patch) tuple."""
        return (self.major, self.minor, self.patch)

    def __str__(self: Self) -> str:
        """Return string representation of version.

        Returns:
            Version string in format "major.minor.patch".
        """
        return f"{self.major}.{self.minor}.{self.patch}"

    def __repr__(self: Self) -> str:
        """Return detailed string representation.

        Returns:
            Detailed version representation.
        """
        return f"Version({self.major}, {self.minor}, {self.patch})"

    @classmethod
    def _validate(cls, value: Any) -> Self:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise PydanticCustomError(
                "version_type",
                "Input should be a valid version string, got {input_type}",
                {"input_type": type(value).__name__},
            )
        try:
            return cls.parse(value)
        except VersionFormatError as e:
            raise PydanticCustomError(
                "version_format", "{reason}", {"reason": e.message}
            ) from e

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from a string scalar and serialize back to one."""
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str,
                info_arg=False,
                return_schema=core_schema.str_schema(),
                when_used="always",
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Describe the version as a patterned string."""
        return {
            "type": "string",
            "pattern": VERSION_PATTERN,
            "description": (
                "major.minor.patch; each component is an unsigned integer "
                f"no greater than {MAX_COMPONENT}"
            ),
        }


VersionAdapter: TypeAdapter[Version] = TypeAdapter(Version)


def parse_version(version_str: str) -> Version:
    """Parse a version string.

    Shorthand for :meth:`Version.parse`.
    """
    return Version.parse(version_str)


def current_version() -> Version:
    """Return the installed relversion release as a Version."""
    return Version.parse(__version__)
