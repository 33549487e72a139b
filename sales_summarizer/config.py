"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "sales-summarizer"
    log_level: str = "INFO"

    # Parsing
    strict_numbers: bool = False  # Reject non-numeric sales/cost fields instead of yielding nan
    max_input_chars: int = 1_000_000


settings = Settings()
