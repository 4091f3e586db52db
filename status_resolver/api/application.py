"""FastAPI application factory for the status resolution service."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Final

from fastapi import FastAPI

from status_resolver.config import AppSettings
from status_resolver.domain import AppMetadata
from status_resolver.resolver import StatusResolverPort

from .routers import api_create_health_router, api_create_status_router

_SHUTDOWN_DRAIN_TIMEOUT_SECONDS: Final[float] = 2.0


def create_api_application(settings: AppSettings, status_resolver: StatusResolverPort) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        status_resolver: Resolver serving application status lookups.

    Returns:
        FastAPI: Framework application instance with health and status routes.
    """

    metadata = AppMetadata(application_name="application-status-resolver", environment_name=settings.environment_name)

    @asynccontextmanager
    async def api_lifespan(_application: FastAPI) -> AsyncGenerator[None, None]:
        """Drain losing provider lookups when the service shuts down."""

        yield
        await status_resolver.resolver_drain_detached(timeout_seconds=_SHUTDOWN_DRAIN_TIMEOUT_SECONDS)

    application = FastAPI(title="Application Status Resolver", lifespan=api_lifespan)

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return service identification metadata.

        Returns:
            dict[str, str]: Service name, readiness marker and environment.
        """

        return {
            "service": metadata.application_name,
            "status": "ready",
            "environment": metadata.environment_name,
        }

    application.include_router(api_create_health_router(status_resolver=status_resolver))
    application.include_router(api_create_status_router(status_resolver=status_resolver))

    return application
