from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DECIMAL_ASSERT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    LOG_LEVEL: str = Field(
        default="INFO", description="Logging level [DEBUG, INFO, WARNING, ERROR]"
    )

    JSON_LOGS: bool = Field(
        default=False,
        description="Should logs be in JSON format?",
    )

    CONFIGURE_LOGGING: bool = Field(
        default=False,
        description="Should the pytest plugin configure structlog for the session?",
    )

    MARKER_PROPERTY: str = Field(
        default="decimal",
        description="Name of the builder property switching on decimal comparisons",
        examples=["decimal", "as_decimal"],
    )

    BIG_INTEGER_TYPE_NAMES: list[str] = Field(
        default=["BN"],
        description="Type names converted to Decimal through their string form",
        examples=[["BN"], ["BN", "BigInteger"]],
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if value.upper() not in valid_levels:
            raise ValueError(
                f"Invalid LOG_LEVEL '{value}'. Must be one of {valid_levels}"
            )
        return value.upper()

    @field_validator("MARKER_PROPERTY")
    @classmethod
    def validate_marker_property(cls, value: str) -> str:
        if not value.isidentifier() or value.startswith("_"):
            raise ValueError(
                f"MARKER_PROPERTY must be a public Python identifier, got '{value}'"
            )
        return value

    @field_validator("BIG_INTEGER_TYPE_NAMES")
    @classmethod
    def validate_big_integer_type_names(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("BIG_INTEGER_TYPE_NAMES must not be empty")
        if any(not name.strip() for name in value):
            raise ValueError("BIG_INTEGER_TYPE_NAMES must not contain blank names")
        return [name.strip() for name in value]


@lru_cache()
def get_settings() -> Settings:
    from decimal_assert.shared.logging import get_logger

    logger = get_logger(__name__)

    try:
        settings = Settings()
        logger.debug("Settings loaded successfully")
        return settings

    except Exception as e:
        logger.error(f"Failed to load settings: {e}", exc_info=True)
        raise
