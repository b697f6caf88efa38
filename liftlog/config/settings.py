from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_file() -> Path:
    """Default location of the local JSON store."""
    return Path.home() / ".liftlog" / "store.json"


class Settings(BaseSettings):
    data_file: Path = Field(
        default_factory=get_default_data_file,
        validation_alias="LIFTLOG_DATA_FILE",
        description="JSON document holding builder config, program and log",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(
        default=None,
        validation_alias="LIFTLOG_LOG_FILE",
        description="Optional rotating log file",
    )
    default_units: str = Field(default="lb", validation_alias="LIFTLOG_DEFAULT_UNITS")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("default_units")
    @classmethod
    def validate_default_units(cls, value: str) -> str:
        lowered = value.lower()
        if lowered not in {"lb", "kg"}:
            logger.warning(f"Invalid LIFTLOG_DEFAULT_UNITS '{value}'. Defaulting to lb.")
            return "lb"
        return lowered

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
