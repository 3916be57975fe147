"""Exceptions raised while reading version strings."""

from typing import Self


class VersionFormatError(ValueError):
    """Base exception for version strings that cannot be parsed.

    Attributes:
        version: The input text that failed to parse.
    """

    def __init__(self: Self, version: str) -> None:
        """Initialize the error.

        Args:
            version: The input text that failed to parse.
        """
        self.version = version
        super().__init__(self.message)

    @property
    def reason(self: Self) -> str:
        """Describe what was wrong with the input."""
        return "invalid version"

    @property
    def message(self: Self) -> str:
        """Return the full, human-readable error message."""
        return f"Invalid version format: {self.reason}."


class ComponentCountError(VersionFormatError):
    """Raised when the input does not split into the expected component count.

    Attributes:
        version: The input text that failed to parse.
        expected: Number of dot-separated components required.
        actual: Number of dot-separated components found.
    """

    def __init__(self: Self, version: str, actual: int, expected: int = 3) -> None:
        """Initialize the error.

        Args:
            version: The input text that failed to parse.
            actual: Number of dot-separated components found.
            expected: Number of dot-separated components required.
        """
        self.expected = expected
        self.actual = actual
        super().__init__(version)

    @property
    def reason(self: Self) -> str:
        """Describe the component count mismatch."""
        return f"expected {self.expected} components, got {self.actual}"


class ComponentValueError(VersionFormatError):
    """Raised when a component is not a valid unsigned integer.

    Attributes:
        version: The input text that failed to parse.
        component: The offending component, verbatim.
    """

    def __init__(self: Self, version: str, component: str) -> None:
        """Initialize the error.

        Args:
            version: The input text that failed to parse.
            component: The offending component, verbatim.
        """
        self.component = component
        super().__init__(version)

    @property
    def reason(self: Self) -> str:
        """Describe the offending component."""
        return f"expected integer, got '{self.component}'"
