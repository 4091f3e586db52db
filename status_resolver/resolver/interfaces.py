"""Typed interfaces for resolver-layer responsibilities."""

from typing import Protocol

from status_resolver.domain import ApplicationStatus


class StatusResolverPort(Protocol):
    """Port definition for resolving one application status."""

    def resolver_provider_names(self) -> tuple[str, ...]:
        """Return the source names of the raced providers.

        Returns:
            tuple[str, ...]: Provider names in launch order.
        """

    async def resolver_resolve(self, application_id: str) -> ApplicationStatus:
        """Resolve one application status.

        Args:
            application_id: Application identifier.

        Returns:
            ApplicationStatus: Resolved or unresolved status, never an exception.
        """

    async def resolver_drain_detached(self, timeout_seconds: float | None = None) -> int:
        """Wait for detached losing lookups to finish.

        Args:
            timeout_seconds: Optional maximum wait.

        Returns:
            int: Number of detached lookups still running after the wait.
        """
