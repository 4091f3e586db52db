"""Typed domain models shared across runtime layers.

Provider outcomes and caller-facing application statuses are closed unions of
frozen dataclasses. Consumers dispatch with `isinstance` and keep a fallback
branch for shapes outside the union.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union


@dataclass(frozen=True)
class OutcomeSuccess:
    """Provider positively resolved the application.

    Attributes:
        application_id: Application identifier reported by the provider.
        status: Provider status text.
    """

    application_id: str
    status: str


@dataclass(frozen=True)
class OutcomeFailure:
    """Provider determined the application cannot be resolved."""


@dataclass(frozen=True)
class OutcomeRetry:
    """Provider could not resolve now and advises a later retry.

    Attributes:
        delay_seconds: Advised wait before retrying.
    """

    delay_seconds: float

    def __post_init__(self) -> None:
        if self.delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")


Outcome = Union[OutcomeSuccess, OutcomeFailure, OutcomeRetry]


@dataclass(frozen=True)
class ApplicationStatusResolved:
    """Terminal success status returned to callers.

    Attributes:
        application_id: Resolved application identifier.
        status: Resolved status text.
    """

    application_id: str
    status: str


@dataclass(frozen=True)
class ApplicationStatusUnresolved:
    """Terminal failure status for one resolve call.

    Attributes:
        last_attempt_at_utc: Time of the failed attempt, absent when no clock read applies.
        retry_count: Advisory marker, `1` when a provider advised a retry, otherwise `0`.
    """

    last_attempt_at_utc: datetime | None
    retry_count: int

    def __post_init__(self) -> None:
        if self.retry_count < 0:
            raise ValueError("retry_count must be >= 0")


ApplicationStatus = Union[ApplicationStatusResolved, ApplicationStatusUnresolved]


@dataclass(frozen=True)
class AppMetadata:
    """Static application metadata for runtime identification.

    Attributes:
        application_name: Human-readable app name.
        environment_name: Runtime environment label.
    """

    application_name: str
    environment_name: str
