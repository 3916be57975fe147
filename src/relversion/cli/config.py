"""Reading the project version from pyproject.toml."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from ..exceptions import VersionFormatError
from ..version import Version

logger = logging.getLogger(__name__)

PYPROJECT = "pyproject.toml"


class ConfigError(Exception):
    """Raised when the project configuration cannot be used."""


def find_config(config_path: Path | None = None) -> Path | None:
    """Locate the project file to read the version from.

    Args:
        config_path: Explicit path to a TOML file. Takes precedence.

    Returns:
        Path to the project file, or None if there is none.

    Raises:
        ConfigError: If an explicit path was given but does not exist.
    """
    if config_path is not None:
        if not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
        return config_path

    candidate = Path.cwd() / PYPROJECT
    return candidate if candidate.is_file() else None


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def load_project_version(config_path: Path | None = None) -> Version | None:
    """Load the [project].version of a project.

    Args:
        config_path: Explicit path to a TOML file. Defaults to pyproject.toml in
            the current directory.

    Returns:
        The parsed project version, or None if no project file exists.

    Raises:
        ConfigError: If the file is invalid, has no version, or the version is
            not a major.minor.patch string.
    """
    path = find_config(config_path)
    if path is None:
        logger.debug("No %s found in %s", PYPROJECT, Path.cwd())
        return None

    data = _read_toml(path)
    project = data.get("project", {})
    if not isinstance(project, dict):
        raise ConfigError(f"[project] in {path} must be a table")

    raw = project.get("version")
    if raw is None:
        raise ConfigError(f"No [project].version in {path}")
    if not isinstance(raw, str):
        raise ConfigError(
            f"[project].version in {path} must be a string, "
            f"got {type(raw).__name__}"
        )

    try:
        version = Version.parse(raw)
    except VersionFormatError as e:
        raise ConfigError(f"{path}: {e}") from e

    logger.debug("Read version %s from %s", version, path)
    return version
