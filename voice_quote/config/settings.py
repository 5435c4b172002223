from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    # Form defaults
    default_call_duration: float = Field(default=5.0, ge=1)  # minutes, not priced
    default_total_minutes: float = Field(default=1000.0, ge=1)
    default_margin: float = Field(default=20.0, ge=0, le=100)  # percent

    # Result display
    currency_symbol: str = Field(default="$")
    per_minute_decimals: int = Field(default=4, ge=0)
    total_decimals: int = Field(default=2, ge=0)

    # Monitoring
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="VOICE_QUOTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Global settings instance
settings = Settings()
