"""
Engine Configuration

Uses Pydantic Settings for type-safe configuration.
Every field can be overridden with a MOTO_GPX_* environment variable.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings with validation."""

    # === Core ===
    log_level: str = Field(default="INFO", description="Logging level")

    # === Statistics ===
    average_speed_kmh: float = Field(
        default=30.0,
        gt=0,
        description="Assumed average riding speed used for duration estimates"
    )
    loop_threshold_km: float = Field(
        default=0.5,
        ge=0,
        description="Start/end distance under which a route counts as a loop"
    )

    # === Serialization ===
    gpx_creator: str = Field(
        default="ADV Moto Hub",
        description="Value of the creator attribute in generated GPX files"
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept 'debug', 'Debug', ... and store upper case."""
        return v.strip().upper()

    model_config = SettingsConfigDict(
        env_prefix="MOTO_GPX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
