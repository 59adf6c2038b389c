"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./finwell.db"

    # External Services
    generator_api_base: str = "http://localhost:8001"

    # Service
    service_name: str = "finwell-gateway"
    log_level: str = "INFO"

    # Profile timestamps are written in a fixed offset (Johannesburg, UTC+2)
    timezone_offset_hours: int = 2

    # HTTP Client
    http_timeout_seconds: float = 30.0


settings = Settings()
