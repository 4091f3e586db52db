"""Serialization helpers for caller-facing application statuses."""

from __future__ import annotations

from .models import ApplicationStatus, ApplicationStatusResolved, ApplicationStatusUnresolved


def domain_serialize_application_status(application_status: ApplicationStatus) -> dict[str, object]:
    """Convert one application status into a JSON-compatible payload.

    Args:
        application_status: Resolved or unresolved status value.

    Returns:
        dict[str, object]: Payload tagged by `kind`.

    Raises:
        TypeError: Raised when the value is not a known application status.
    """

    if isinstance(application_status, ApplicationStatusResolved):
        return {
            "kind": "resolved",
            "application_id": application_status.application_id,
            "status": application_status.status,
        }
    if isinstance(application_status, ApplicationStatusUnresolved):
        last_attempt_at_utc = application_status.last_attempt_at_utc
        return {
            "kind": "unresolved",
            "last_attempt_at_utc": last_attempt_at_utc.isoformat() if last_attempt_at_utc is not None else None,
            "retry_count": application_status.retry_count,
        }
    raise TypeError(f"unsupported application status type: {type(application_status).__name__}")
