"""Typed interfaces for status provider responsibilities."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field
from typing import Protocol

from status_resolver.domain import Outcome


@dataclass(frozen=True)
class LookupContext:
    """Shared cancellation and deadline token for one resolve call.

    One instance is handed to every provider raced in the same call. Cancelling
    it, or passing its deadline, tells all of them to stop.

    Attributes:
        deadline_at_monotonic: Absolute deadline on the `time.monotonic` clock.
        cancelled_event: Event set once the context is explicitly cancelled.
    """

    deadline_at_monotonic: float
    cancelled_event: asyncio.Event = field(default_factory=asyncio.Event)

    @classmethod
    def context_with_timeout(cls, timeout_seconds: float) -> LookupContext:
        """Build a context whose deadline is `timeout_seconds` from now.

        Args:
            timeout_seconds: Relative deadline budget.

        Returns:
            LookupContext: Fresh, uncancelled context.

        Raises:
            ValueError: Raised when timeout is not positive.
        """

        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        return cls(deadline_at_monotonic=time.monotonic() + timeout_seconds)

    def context_cancel(self) -> None:
        """Signal cancellation to every holder of this context."""

        self.cancelled_event.set()

    def context_remaining_seconds(self) -> float:
        """Return seconds left before the deadline, never below zero."""

        return max(0.0, self.deadline_at_monotonic - time.monotonic())

    def context_is_cancelled(self) -> bool:
        """Return whether the context was cancelled or its deadline passed."""

        return self.cancelled_event.is_set() or self.context_remaining_seconds() <= 0

    async def context_wait_cancelled(self, timeout_seconds: float | None = None) -> bool:
        """Wait until the context is cancelled, its deadline passes, or the timeout elapses.

        Args:
            timeout_seconds: Optional maximum wait. The context deadline always applies.

        Returns:
            bool: True when the context became cancelled, False when the timeout elapsed first.

        Raises:
            asyncio.CancelledError: Raised when the waiting task itself is cancelled.
        """

        wait_budget_seconds = self.context_remaining_seconds()
        if timeout_seconds is not None:
            wait_budget_seconds = min(wait_budget_seconds, max(0.0, timeout_seconds))

        try:
            await asyncio.wait_for(self.cancelled_event.wait(), timeout=wait_budget_seconds)
        except asyncio.TimeoutError:
            pass
        return self.context_is_cancelled()


class StatusProviderPort(Protocol):
    """Port definition for looking up one application status upstream."""

    def provider_source_name(self) -> str:
        """Return provider source identifier for diagnostics.

        Returns:
            str: Human-readable upstream source identifier.
        """

    async def provider_lookup_status(self, application_id: str, lookup_context: LookupContext) -> Outcome:
        """Look up one application status from the upstream source.

        Args:
            application_id: Application identifier.
            lookup_context: Shared cancellation and deadline token.

        Returns:
            Outcome: Success, failure or retry advice.

        Raises:
            StatusProviderConnectionError: Raised when upstream connection fails.
            StatusProviderTimeoutError: Raised when upstream does not answer in time.
            StatusProviderCancelledError: Raised when the lookup context is cancelled first.
        """
