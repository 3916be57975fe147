"""Tests for cli/config.py."""

import logging
from pathlib import Path

import pytest
from pytest import MonkeyPatch

from relversion import Version
from relversion.cli.config import ConfigError, find_config, load_project_version


def test_find_config_default(project_dir: Path) -> None:
    """Test pyproject.toml in the working directory is found."""
    assert find_config() == project_dir / "pyproject.toml"


def test_find_config_none(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    """Test no project file yields None."""
    monkeypatch.chdir(tmp_path)
    assert find_config() is None
    assert load_project_version() is None


def test_find_config_explicit_missing(tmp_path: Path) -> None:
    """Test an explicit path that does not exist."""
    with pytest.raises(ConfigError, match="Config file not found"):
        find_config(tmp_path / "missing.toml")


def test_load_project_version(
    project_dir: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Test the project version is parsed and logged."""
    with caplog.at_level(logging.DEBUG, logger="relversion.cli.config"):
        version = load_project_version()

    assert version == Version(2, 4, 1)
    assert "Read version 2.4.1" in caplog.text


def test_load_missing_version(tmp_path: Path) -> None:
    """Test a project file without a version."""
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text('[project]\nname = "x"\n')

    with pytest.raises(ConfigError, match=r"No \[project\]\.version"):
        load_project_version(config_file)


def test_load_project_not_a_table(tmp_path: Path) -> None:
    """Test a project key that is not a table."""
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text('project = "x"\n')

    with pytest.raises(ConfigError, match=r"\[project\] in .* must be a table"):
        load_project_version(config_file)


def test_load_non_string_version(tmp_path: Path) -> None:
    """Test a version that is not a string."""
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text("[project]\nversion = 1\n")

    with pytest.raises(ConfigError, match="must be a string, got int"):
        load_project_version(config_file)


def test_load_invalid_toml(tmp_path: Path) -> None:
    """Test a file that is not valid TOML."""
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text("[project\n")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_project_version(config_file)


def test_load_unparsable_version(tmp_path: Path) -> None:
    """Test the parse error is carried into the config error."""
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text('[project]\nversion = "1.0"\n')

    with pytest.raises(ConfigError, match="expected 3 components, got 2"):
        load_project_version(config_file)
