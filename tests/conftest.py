"""Shared fixtures."""

from pathlib import Path
from textwrap import dedent

import pytest
from pydantic import BaseModel
from pytest import MonkeyPatch

from relversion import Version


class Manifest(BaseModel):
    """A document embedding a version as a leaf scalar."""

    name: str
    version: Version


@pytest.fixture
def manifest_model() -> type[Manifest]:
    """Return a model with a Version field."""
    return Manifest


@pytest.fixture
def v100() -> Version:
    """Return version 1.0.0."""
    return Version.parse("1.0.0")


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Create a project with a pyproject.toml and chdir into it."""
    (tmp_path / "pyproject.toml").write_text(
        dedent("""
        [project]
        name = "example"
        version = "2.04.1"
    """)
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path
