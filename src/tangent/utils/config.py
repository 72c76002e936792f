"""Configuration management for Tangent."""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Get TANGENT_HOME for .env file location
_tangent_home = Path(os.environ.get("TANGENT_HOME", os.path.expanduser("~/.tangent")))
_env_files = [
    str(_tangent_home / ".env"),
    ".env",
]


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="TANGENT_",
        env_file=tuple(_env_files),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Bridge server settings
    api_host: str = "127.0.0.1"
    api_port: int = 1430
    debug: bool = False

    # Application identity, used as the app data folder name
    app_identifier: str = "com.tangent.notebook"

    # Directory overrides (platform resolution when unset)
    app_data_dir: Path | None = None
    documents_dir: Path | None = None

    # Storage layout
    notebooks_folder_name: str = "Tangent Notebooks"
    recent_files_name: str = "recent_files.json"
    recent_files_limit: int = Field(default=10, ge=1, le=10)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
