"""Health endpoint router composition for app liveness checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from status_resolver.resolver import StatusResolverPort


def api_create_health_router(status_resolver: StatusResolverPort) -> APIRouter:
    """Create health-check router reporting app state and raced providers.

    Args:
        status_resolver: Resolver whose provider configuration is reported.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when status_resolver is invalid.
    """

    if status_resolver is None:
        raise ValueError("status_resolver must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application health state.

        Returns:
            JSONResponse: Deterministic health payload for operational checks.
        """

        payload = {
            "status": "ok",
            "app": "up",
            "providers": list(status_resolver.resolver_provider_names()),
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
