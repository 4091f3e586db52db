"""Tests for API status, health and foundation endpoints."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi.testclient import TestClient

from status_resolver.adapters import SimulatedStatusProvider
from status_resolver.api.application import create_api_application
from status_resolver.config import AppSettings
from status_resolver.domain import ApplicationStatus, ApplicationStatusResolved, ApplicationStatusUnresolved
from status_resolver.resolver import StatusResolver


class _StatusResolverStub:
    """Resolver stub returning a fixed status and recording requested ids."""

    def __init__(self, application_status: ApplicationStatus):
        """Initialize resolver stub.

        Args:
            application_status: Status returned for every request.

        Returns:
            None: Initializer does not return values.
        """

        self._application_status = application_status
        self.requested_ids: list[str] = []
        self.drain_timeouts: list[float | None] = []

    def resolver_provider_names(self) -> tuple[str, ...]:
        """Return deterministic provider names.

        Returns:
            tuple[str, ...]: Provider names.
        """

        return ("primary", "secondary")

    async def resolver_resolve(self, application_id: str) -> ApplicationStatus:
        """Record id and return fixed status.

        Args:
            application_id: Application identifier.

        Returns:
            ApplicationStatus: Fixed status.
        """

        self.requested_ids.append(application_id)
        return self._application_status

    async def resolver_drain_detached(self, timeout_seconds: float | None = None) -> int:
        """Record drain request.

        Args:
            timeout_seconds: Requested maximum wait.

        Returns:
            int: Always zero running lookups.
        """

        self.drain_timeouts.append(timeout_seconds)
        return 0


def _build_settings() -> AppSettings:
    """Create test settings object.

    Returns:
        AppSettings: Deterministic test settings for API creation.
    """

    return AppSettings(_env_file=None, environment_name="test")


def test_api_status_returns_resolved_payload() -> None:
    """Return HTTP 200 with resolved payload.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    resolver_stub = _StatusResolverStub(ApplicationStatusResolved(application_id="123", status="Processed"))
    client = TestClient(create_api_application(_build_settings(), resolver_stub))

    response = client.get("/applications/123/status")

    assert response.status_code == 200
    assert response.json() == {"kind": "resolved", "application_id": "123", "status": "Processed"}
    assert resolver_stub.requested_ids == ["123"]


def test_api_status_returns_unresolved_payload_with_retry_marker() -> None:
    """Return HTTP 200 with unresolved payload instead of an error status.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    attempted_at = datetime(2026, 5, 6, 7, 8, 9, tzinfo=timezone.utc)
    resolver_stub = _StatusResolverStub(ApplicationStatusUnresolved(last_attempt_at_utc=attempted_at, retry_count=1))
    client = TestClient(create_api_application(_build_settings(), resolver_stub))

    response = client.get("/applications/abc/status")

    assert response.status_code == 200
    assert response.json() == {
        "kind": "unresolved",
        "last_attempt_at_utc": "2026-05-06T07:08:09+00:00",
        "retry_count": 1,
    }


def test_api_status_rejects_blank_application_id() -> None:
    """Return HTTP 422 for whitespace-only ids without calling the resolver.

    Returns:
        None: Assertions validate request validation.

    Raises:
        AssertionError: Raised when blank id reaches the resolver.
    """

    resolver_stub = _StatusResolverStub(ApplicationStatusResolved(application_id="x", status="x"))
    client = TestClient(create_api_application(_build_settings(), resolver_stub))

    response = client.get("/applications/%20/status")

    assert response.status_code == 422
    assert resolver_stub.requested_ids == []


def test_api_status_races_simulated_providers_end_to_end() -> None:
    """Resolve through a real resolver racing two simulated providers.

    Returns:
        None: Assertions validate faster provider wins through HTTP.

    Raises:
        AssertionError: Raised when slower provider answer is returned.
    """

    status_resolver = StatusResolver(
        primary_provider=SimulatedStatusProvider("fast", delay_seconds=0.01, simulated_status="Processed"),
        secondary_provider=SimulatedStatusProvider("slow", delay_seconds=0.5, simulated_status="Other"),
        deadline_seconds=2.0,
    )
    with TestClient(create_api_application(_build_settings(), status_resolver)) as client:
        response = client.get("/applications/555/status")

    assert response.status_code == 200
    assert response.json() == {"kind": "resolved", "application_id": "555", "status": "Processed"}


def test_api_health_and_foundation_endpoints() -> None:
    """Return provider names on health and environment on index.

    Returns:
        None: Assertions validate operational endpoints.

    Raises:
        AssertionError: Raised when payloads differ.
    """

    resolver_stub = _StatusResolverStub(ApplicationStatusResolved(application_id="x", status="x"))
    client = TestClient(create_api_application(_build_settings(), resolver_stub))

    health_response = client.get("/health")
    index_response = client.get("/")

    assert health_response.status_code == 200
    assert health_response.json() == {"status": "ok", "app": "up", "providers": ["primary", "secondary"]}
    assert index_response.json()["environment"] == "test"
    assert index_response.json()["service"] == "application-status-resolver"


def test_api_shutdown_drains_detached_lookups() -> None:
    """Drain losing lookups with a bounded wait when the app stops.

    Returns:
        None: Assertions validate lifespan shutdown behavior.

    Raises:
        AssertionError: Raised when shutdown skips the drain.
    """

    resolver_stub = _StatusResolverStub(ApplicationStatusResolved(application_id="x", status="x"))

    with TestClient(create_api_application(_build_settings(), resolver_stub)) as client:
        client.get("/applications/x/status")
        assert resolver_stub.drain_timeouts == []

    assert resolver_stub.drain_timeouts == [2.0]
