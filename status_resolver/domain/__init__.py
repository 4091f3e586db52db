"""Domain models used across application layer boundaries."""

from .models import (
    AppMetadata,
    ApplicationStatus,
    ApplicationStatusResolved,
    ApplicationStatusUnresolved,
    Outcome,
    OutcomeFailure,
    OutcomeRetry,
    OutcomeSuccess,
)
from .serialization import domain_serialize_application_status

__all__ = [
    "AppMetadata",
    "ApplicationStatus",
    "ApplicationStatusResolved",
    "ApplicationStatusUnresolved",
    "Outcome",
    "OutcomeFailure",
    "OutcomeRetry",
    "OutcomeSuccess",
    "domain_serialize_application_status",
]
