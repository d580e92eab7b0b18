"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database
    database_url: str = "postgresql://localhost:5432/pharmatrack"

    # Document storage
    upload_dir: Path = Path("uploads")
    default_upload_namespace: str = "default"

    # Credentials
    bcrypt_rounds: int = 10
    demo_username: str = "harshal"
    demo_password: str = "hp"

    # Logging
    environment: str = "development"
    log_level: str = "INFO"
    log_dir: Path = Path(".")

    # Application
    debug: bool = False
    api_host: str = "0.0.0.0"
    api_port: int = 5000

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings used by the server entry point."""
    return Settings()
