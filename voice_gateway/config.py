"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "voice-gateway"
    log_level: str = "INFO"

    # Assistant
    default_locale: str = "es"
    speech_rate: float = 0.8  # Synthesizer playback rate
    max_listed_items: int = 3  # Debtors / low-stock products read out per answer


settings = Settings()
