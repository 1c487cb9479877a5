"""Pytest configuration for import resolver tests."""

from pathlib import Path

import pytest
from import_resolver import settings


@pytest.fixture(autouse=True)
def isolated_options(monkeypatch):
    """Start every test with unset options and no R_IMPORT_PATH."""
    monkeypatch.delenv(settings.IMPORT_PATH_ENV, raising=False)
    monkeypatch.setattr(settings, "_options", settings.ImportOptions())


@pytest.fixture
def write_files(tmp_path):
    """Create files below tmp_path from relative names."""

    def _write(*names: str) -> Path:
        for name in names:
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(f"# {name}\n")
        return tmp_path

    return _write
