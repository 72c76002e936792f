"""Tests for platform directory resolution and the default save directory."""

from __future__ import annotations

from pathlib import Path

import pytest

from tangent.bridge import IOFailure, PlatformResolutionError, get_default_save_directory
from tangent.bridge import commands, paths
from tangent.utils.config import get_settings


@pytest.fixture
def no_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure platform resolution is used, not settings overrides."""
    monkeypatch.delenv("TANGENT_APP_DATA_DIR", raising=False)
    monkeypatch.delenv("TANGENT_DOCUMENTS_DIR", raising=False)
    get_settings.cache_clear()


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(paths.Path, "home", classmethod(lambda cls: home))
    return home


class TestAppDataDir:
    """Tests for the application data directory."""

    def test_settings_override(self, app_data_dir: Path) -> None:
        """TANGENT_APP_DATA_DIR wins over platform rules."""
        assert paths.app_data_dir() == app_data_dir
        assert paths.recent_files_path() == app_data_dir / "recent_files.json"

    def test_linux_xdg_data_home(
        self, no_overrides: None, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Linux uses $XDG_DATA_HOME/<identifier>."""
        monkeypatch.setattr(paths.sys, "platform", "linux")
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

        assert paths.app_data_dir() == tmp_path / "data" / "com.tangent.notebook"

    def test_linux_default(
        self, no_overrides: None, fake_home: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without XDG_DATA_HOME, ~/.local/share is used."""
        monkeypatch.setattr(paths.sys, "platform", "linux")
        monkeypatch.delenv("XDG_DATA_HOME", raising=False)

        assert paths.app_data_dir() == fake_home / ".local" / "share" / "com.tangent.notebook"

    def test_macos(self, no_overrides: None, fake_home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """macOS uses Application Support."""
        monkeypatch.setattr(paths.sys, "platform", "darwin")

        expected = fake_home / "Library" / "Application Support" / "com.tangent.notebook"
        assert paths.app_data_dir() == expected

    def test_windows_appdata(
        self, no_overrides: None, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Windows uses %APPDATA%."""
        monkeypatch.setattr(paths.sys, "platform", "win32")
        monkeypatch.setenv("APPDATA", str(tmp_path / "Roaming"))

        assert paths.app_data_dir() == tmp_path / "Roaming" / "com.tangent.notebook"

    def test_windows_without_appdata(self, no_overrides: None, monkeypatch: pytest.MonkeyPatch) -> None:
        """No APPDATA on Windows is a resolution failure."""
        monkeypatch.setattr(paths.sys, "platform", "win32")
        monkeypatch.delenv("APPDATA", raising=False)

        with pytest.raises(PlatformResolutionError, match="Failed to get app data directory"):
            paths.app_data_dir()

    def test_custom_identifier(
        self, no_overrides: None, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The folder name follows the app identifier setting."""
        monkeypatch.setattr(paths.sys, "platform", "linux")
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
        monkeypatch.setenv("TANGENT_APP_IDENTIFIER", "dev.tangent")
        get_settings.cache_clear()

        assert paths.app_data_dir() == tmp_path / "dev.tangent"


class TestDocumentsDir:
    """Tests for the documents directory."""

    def test_settings_override(self, documents_dir: Path) -> None:
        assert paths.documents_dir() == documents_dir

    def test_linux_env_var(
        self, no_overrides: None, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """XDG_DOCUMENTS_DIR from the environment is honored."""
        monkeypatch.setattr(paths.sys, "platform", "linux")
        monkeypatch.setenv("XDG_DOCUMENTS_DIR", str(tmp_path / "Docs"))

        assert paths.documents_dir() == tmp_path / "Docs"

    def test_linux_user_dirs_file(
        self,
        no_overrides: None,
        fake_home: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """XDG_DOCUMENTS_DIR is read from user-dirs.dirs."""
        monkeypatch.setattr(paths.sys, "platform", "linux")
        monkeypatch.delenv("XDG_DOCUMENTS_DIR", raising=False)
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        config = fake_home / ".config"
        config.mkdir()
        (config / "user-dirs.dirs").write_text(
            '# written by xdg-user-dirs-update\n'
            'XDG_DESKTOP_DIR="$HOME/Desktop"\n'
            'XDG_DOCUMENTS_DIR="$HOME/Dokumente"\n'
        )

        assert paths.documents_dir() == fake_home / "Dokumente"

    def test_fallback_to_home_documents(
        self,
        no_overrides: None,
        fake_home: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Without any XDG hints, ~/Documents is used."""
        monkeypatch.setattr(paths.sys, "platform", "linux")
        monkeypatch.delenv("XDG_DOCUMENTS_DIR", raising=False)
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

        assert paths.documents_dir() == fake_home / "Documents"

    def test_unresolvable_home(self, no_overrides: None, monkeypatch: pytest.MonkeyPatch) -> None:
        """A missing home directory is a resolution failure."""
        monkeypatch.setattr(paths.sys, "platform", "darwin")

        def no_home(cls: type) -> Path:
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(paths.Path, "home", classmethod(no_home))

        with pytest.raises(PlatformResolutionError, match="Failed to get documents directory"):
            paths.documents_dir()


class TestDefaultSaveDirectory:
    """Tests for get_default_save_directory."""

    def test_creates_directory(self, documents_dir: Path) -> None:
        """The notebooks folder is created on first call."""
        target = documents_dir / "Tangent Notebooks"
        assert not target.exists()

        result = get_default_save_directory()

        assert result == str(target)
        assert target.is_dir()
        assert Path(result).is_absolute()

    def test_second_call_is_noop(self, documents_dir: Path) -> None:
        """Calling again returns the same path and keeps contents."""
        first = get_default_save_directory()
        (Path(first) / "existing.js").write_text("keep me")

        second = get_default_save_directory()

        assert second == first
        assert (Path(second) / "existing.js").read_text() == "keep me"

    def test_creates_missing_documents_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Intermediate directories are created too."""
        monkeypatch.setenv("TANGENT_DOCUMENTS_DIR", str(tmp_path / "fresh" / "Documents"))
        get_settings.cache_clear()

        result = get_default_save_directory()

        assert Path(result).is_dir()

    def test_creation_failure(self, documents_dir: Path) -> None:
        """A file where the documents folder should be is an IO failure."""
        documents_dir.rmdir()
        documents_dir.write_text("not a directory")

        with pytest.raises(IOFailure, match="Failed to create notebooks directory"):
            get_default_save_directory()

    def test_folder_name_from_settings(self, documents_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TANGENT_NOTEBOOKS_FOLDER_NAME", "Scratch")
        get_settings.cache_clear()

        assert get_default_save_directory() == str(documents_dir / "Scratch")

    def test_non_text_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A path that isn't valid text is reported as such."""
        target = tmp_path / "docs\udcff" / "Tangent Notebooks"
        monkeypatch.setattr(commands, "default_save_dir", lambda: target)
        monkeypatch.setattr(Path, "mkdir", lambda self, parents=False, exist_ok=False: None)

        with pytest.raises(PlatformResolutionError, match="Failed to convert path to string"):
            get_default_save_directory()
