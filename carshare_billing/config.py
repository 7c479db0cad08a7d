"""Configuration management using Pydantic Settings"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "carshare-billing"
    log_level: str = "INFO"

    # Dataset files
    data_file: str = "data/data.json"
    output_file: str = "output.json"

    # Prometheus textfile export, disabled when unset
    metrics_file: Optional[str] = None


settings = Settings()
