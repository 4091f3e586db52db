"""Typed runtime settings with dotenv support and startup validation."""

from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for API runtime and status resolution.

    Environment variable names map directly to field names in uppercase.
    Example: `resolve_deadline_seconds` reads from `RESOLVE_DEADLINE_SECONDS`.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        resolve_deadline_seconds: Wall-clock budget for one resolve call.
        log_level: Minimum emitted log level.
        log_format: Log renderer, `console` or `json`.
        primary_provider_name: Source label of the first raced provider.
        secondary_provider_name: Source label of the second raced provider.
        primary_provider_delay_seconds: Simulated latency of the first provider.
        secondary_provider_delay_seconds: Simulated latency of the second provider.
        simulated_status: Status text returned by simulated providers.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8000, ge=1, le=65535)
    resolve_deadline_seconds: float = Field(default=15.0, gt=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_format: Literal["console", "json"] = Field(default="console")
    primary_provider_name: str = Field(default="primary", min_length=1)
    secondary_provider_name: str = Field(default="secondary", min_length=1)
    primary_provider_delay_seconds: float = Field(default=1.0, ge=0)
    secondary_provider_delay_seconds: float = Field(default=1.0, ge=0)
    simulated_status: str = Field(default="Processed", min_length=1)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("primary_provider_name", "secondary_provider_name", "simulated_status")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("secondary_provider_name")
    @classmethod
    def _validate_distinct_provider_names(cls, value: str, info) -> str:
        primary_provider_name = info.data.get("primary_provider_name")
        if primary_provider_name is not None and value == primary_provider_name:
            raise ValueError("secondary_provider_name must differ from primary_provider_name")
        return value


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when required settings are missing or invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
