"""In-process status provider that simulates upstream latency."""

from __future__ import annotations

from typing import Callable

from status_resolver.domain import Outcome, OutcomeSuccess

from .interfaces import LookupContext, StatusProviderPort
from .provider_errors import StatusProviderCancelledError


class SimulatedStatusProvider(StatusProviderPort):
    """Provider that waits a fixed delay, then returns a configured outcome.

    The delay is cooperative: cancelling the shared lookup context ends the
    wait early with `StatusProviderCancelledError`.
    """

    def __init__(
        self,
        source_name: str,
        delay_seconds: float = 1.0,
        outcome_factory: Callable[[str], Outcome] | None = None,
        simulated_status: str = "Processed",
    ):
        """Initialize simulated provider.

        Args:
            source_name: Provider label used in diagnostics.
            delay_seconds: Simulated upstream latency.
            outcome_factory: Optional builder of the outcome for an application id.
            simulated_status: Status text used by the default success outcome.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when configuration values are invalid.
        """

        normalized_source_name = source_name.strip()
        normalized_status = simulated_status.strip()
        if not normalized_source_name:
            raise ValueError("source_name must not be blank")
        if not normalized_status:
            raise ValueError("simulated_status must not be blank")
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")

        self._source_name = normalized_source_name
        self._delay_seconds = delay_seconds
        self._simulated_status = normalized_status
        self._outcome_factory = outcome_factory or self._provider_default_outcome

    def provider_source_name(self) -> str:
        """Return stable provider source label.

        Returns:
            str: Source identifier.
        """

        return self._source_name

    async def provider_lookup_status(self, application_id: str, lookup_context: LookupContext) -> Outcome:
        """Wait the simulated delay and return the configured outcome.

        Args:
            application_id: Application identifier.
            lookup_context: Shared cancellation and deadline token.

        Returns:
            Outcome: Outcome built by the configured factory.

        Raises:
            StatusProviderCancelledError: Raised when the context is cancelled before the delay elapses.
        """

        if self._delay_seconds > 0:
            cancelled = await lookup_context.context_wait_cancelled(timeout_seconds=self._delay_seconds)
        else:
            cancelled = lookup_context.context_is_cancelled()

        if cancelled:
            raise StatusProviderCancelledError(
                f"lookup cancelled for application_id={application_id}",
                provider_name=self._source_name,
            )
        return self._outcome_factory(application_id)

    def _provider_default_outcome(self, application_id: str) -> Outcome:
        return OutcomeSuccess(application_id=application_id, status=self._simulated_status)
