"""Configuration management for ch."""

from __future__ import annotations

import shutil

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="CH_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")

    # Subcommand Configuration
    shell: str | None = Field(default=None, description="Shell used to run exec command lines")
    scp_command: str = Field(default="scp", description="Executable used to copy remote files")
    staging_prefix: str = Field(default="ch-", description="Prefix of the temporary staging directory")
    skip_hidden: bool = Field(default=True, description="Skip dot-files when attaching directories")

    def resolve_shell(self) -> str:
        if self.shell:
            return self.shell
        return shutil.which("bash") or shutil.which("sh") or "sh"


def load_settings() -> Settings:
    """Load settings from CH_* environment variables and an optional .env file."""
    return Settings()
