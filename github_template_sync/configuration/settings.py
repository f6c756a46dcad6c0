"""Pydantic Settings model for application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from github_template_sync.utils.constants import DEFAULT_CLONES_DIR, DEFAULT_GITHUB_API_URL, DEFAULT_GITHUB_URL


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False
    CLONES_DIR: Path = Path(DEFAULT_CLONES_DIR)

    # GitHub settings
    GITHUB_API_URL: str = DEFAULT_GITHUB_API_URL
    GITHUB_URL: str = DEFAULT_GITHUB_URL

    # Token used both for authenticated clones/pushes and for the REST API.
    # Without it, clones are anonymous and only public repositories work.
    GH_TOKEN: str | None = None


def get_settings() -> Settings:
    """Read the settings from the environment and the optional .env file."""
    return Settings()
