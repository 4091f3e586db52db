"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from status_resolver.adapters import SimulatedStatusProvider
from status_resolver.api import create_api_application
from status_resolver.config import AppSettings, config_load_settings
from status_resolver.observability import observability_configure_logging, observability_get_logger
from status_resolver.resolver import StatusResolver


def bootstrap_create_status_resolver(settings: AppSettings) -> StatusResolver:
    """Assemble a status resolver racing the two configured providers.

    Args:
        settings: Validated runtime settings.

    Returns:
        StatusResolver: Resolver wired with providers, deadline and logger.

    Raises:
        ValueError: Raised when provider configuration is invalid.
    """

    primary_provider = SimulatedStatusProvider(
        source_name=settings.primary_provider_name,
        delay_seconds=settings.primary_provider_delay_seconds,
        simulated_status=settings.simulated_status,
    )
    secondary_provider = SimulatedStatusProvider(
        source_name=settings.secondary_provider_name,
        delay_seconds=settings.secondary_provider_delay_seconds,
        simulated_status=settings.simulated_status,
    )
    return StatusResolver(
        primary_provider=primary_provider,
        secondary_provider=secondary_provider,
        logger=observability_get_logger("status_resolver.resolver"),
        deadline_seconds=settings.resolve_deadline_seconds,
    )


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings. Loaded from environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    observability_configure_logging(level=resolved_settings.log_level, log_format=resolved_settings.log_format)
    status_resolver = bootstrap_create_status_resolver(resolved_settings)
    return create_api_application(settings=resolved_settings, status_resolver=status_resolver)
