"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Settlement ledger
    database_url: str = "sqlite:///./hitsort_dashboard.db"

    # External Services
    record_store_base: str = "https://hitsort-backend.onrender.com"
    auth_base: str = "https://hitsort-backend.onrender.com"

    # Service
    service_name: str = "hitsort-dashboard"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 10.0


settings = Settings()
