"""Pytest fixtures and configuration."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

from tangent.utils.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings around every test so env overrides apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def app_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the app data directory at a not-yet-created temp folder."""
    path = tmp_path / "app-data"
    monkeypatch.setenv("TANGENT_APP_DATA_DIR", str(path))
    get_settings.cache_clear()
    return path


@pytest.fixture
def documents_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the documents directory at an existing temp folder."""
    path = tmp_path / "Documents"
    path.mkdir()
    monkeypatch.setenv("TANGENT_DOCUMENTS_DIR", str(path))
    get_settings.cache_clear()
    return path


@pytest.fixture
def bridge_env(app_data_dir: Path, documents_dir: Path) -> dict[str, Path]:
    """Both platform directories redirected to temp folders."""
    return {"app_data_dir": app_data_dir, "documents_dir": documents_dir}


@pytest.fixture
def recent_files_json(app_data_dir: Path) -> Path:
    """Location of the persisted recent files list."""
    return app_data_dir / "recent_files.json"


@pytest.fixture
def sample_notebook_content() -> str:
    """Sample notebook source with mixed line endings and non-ASCII text."""
    return (
        "// Tangent notebook\r\n"
        "export const cells = [\n"
        "  { type: 'markdown', source: '# Température été ☀' },\n"
        "  { type: 'code', source: 'const x = 1;\\nconsole.log(x);' },\r\n"
        "];\n"
    )
