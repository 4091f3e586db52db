"""Application status router composition."""

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse

from status_resolver.domain import domain_serialize_application_status
from status_resolver.resolver import StatusResolverPort


def api_create_status_router(status_resolver: StatusResolverPort) -> APIRouter:
    """Create router exposing application status resolution.

    Args:
        status_resolver: Resolver used to race upstream providers.

    Returns:
        APIRouter: Router exposing `/applications/{application_id}/status`.

    Raises:
        ValueError: Raised when status_resolver is invalid.
    """

    if status_resolver is None:
        raise ValueError("status_resolver must not be None")

    router = APIRouter(tags=["applications"])

    @router.get("/applications/{application_id}/status")
    async def api_get_application_status(application_id: str) -> JSONResponse:
        """Resolve and return one application status.

        Args:
            application_id: Application identifier path parameter.

        Returns:
            JSONResponse: Serialized application status tagged by `kind`.

        Raises:
            HTTPException: Raised with 422 when application id is blank.
        """

        normalized_application_id = application_id.strip()
        if not normalized_application_id:
            raise HTTPException(
                status_code=422,
                detail="application_id must not be blank",
            )

        application_status = await status_resolver.resolver_resolve(normalized_application_id)
        return JSONResponse(
            content=domain_serialize_application_status(application_status),
            status_code=status.HTTP_200_OK,
        )

    return router
