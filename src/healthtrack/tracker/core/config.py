"""Settings for the tracker command line tools."""

from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables prefixed with TRACKER_."""

    model_config = SettingsConfigDict(
        env_prefix='TRACKER_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    log_level: str = 'WARNING'
    pretty: bool = True


def get_settings() -> Settings:
    """Load settings from the current environment."""
    return Settings()
