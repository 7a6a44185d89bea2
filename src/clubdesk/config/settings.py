"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Return the default data directory (next to the working directory)."""
    return Path.cwd() / "data"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CLUBDESK_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Club Back Office"
    app_version: str = "0.1.0"

    # Data directory (SQLite database lives here unless database_url is set)
    data_dir: Optional[Path] = None
    database_url: Optional[str] = None

    log_level: str = "INFO"

    # Post editor autosave quiet period
    autosave_debounce_ms: int = 2000

    # Bookings
    checkout_cutoff_hour: int = 11

    # Money and display
    currency: str = "USD"
    display_timezone: str = "America/Los_Angeles"

    # Image uploads (pre-signed POST)
    upload_bucket: str = "clubdesk-media"
    upload_endpoint: str = "https://storage.example.com"
    upload_max_bytes: int = 10 * 1024 * 1024
    upload_ttl_seconds: int = 600
    upload_signing_secret: str = "change-me"

    @property
    def autosave_debounce_seconds(self) -> float:
        return self.autosave_debounce_ms / 1000

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "clubdesk.db"
        return f"sqlite:///{db_path}"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Replace the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
