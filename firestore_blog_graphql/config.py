"""
Process configuration loaded from the environment (and an optional ``.env``).
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # HTTP
    host: str = "0.0.0.0"
    port: int = 4000
    graphql_path: str = "/"

    # Apollo Engine key; enables tracing output when present
    engine_api_key: Optional[str] = None

    # Firestore
    google_cloud_project: Optional[str] = None
    database: Optional[str] = None
    google_application_credentials: Optional[str] = None
    firestore_emulator_host: Optional[str] = None

    # Environment
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


def get_settings() -> Settings:
    return Settings()
