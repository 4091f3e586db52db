"""Status resolver that races redundant providers under one shared deadline."""

from __future__ import annotations

import asyncio
import functools
from datetime import datetime, timezone
from typing import Any, Callable, Final

from status_resolver.adapters import LookupContext, StatusProviderCancelledError, StatusProviderPort
from status_resolver.domain import (
    ApplicationStatus,
    ApplicationStatusResolved,
    ApplicationStatusUnresolved,
    Outcome,
    OutcomeFailure,
    OutcomeRetry,
    OutcomeSuccess,
)
from status_resolver.observability import observability_create_null_logger

from .interfaces import StatusResolverPort


def _resolver_utc_now() -> datetime:
    return datetime.now(timezone.utc)


class StatusResolver(StatusResolverPort):
    """Resolve application status from whichever of two providers answers first.

    Every call builds its own `LookupContext` and hands it to both providers.
    The first lookup to finish, successfully or not, decides the result. The
    other lookup is signalled through the context, cancelled, and detached; its
    eventual result is consumed by a done-callback and never reaches the caller.
    """

    DEFAULT_DEADLINE_SECONDS: Final[float] = 15.0
    _NOT_RETRIED: Final[int] = 0
    _RETRY_ADVISED: Final[int] = 1

    def __init__(
        self,
        primary_provider: StatusProviderPort,
        secondary_provider: StatusProviderPort,
        logger: Any = None,
        deadline_seconds: float = DEFAULT_DEADLINE_SECONDS,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize status resolver.

        Args:
            primary_provider: First raced provider.
            secondary_provider: Second raced provider.
            logger: Optional structlog logger. Defaults to a logger that drops every event.
            deadline_seconds: Wall-clock budget for one resolve call.
            clock: Optional provider of the current UTC time for unresolved statuses.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when providers are missing or the deadline is not positive.
        """

        if primary_provider is None or secondary_provider is None:
            raise ValueError("both status providers must be supplied")
        if deadline_seconds <= 0:
            raise ValueError("deadline_seconds must be > 0")

        self._providers: tuple[tuple[StatusProviderPort, str], ...] = (
            (primary_provider, primary_provider.provider_source_name()),
            (secondary_provider, secondary_provider.provider_source_name()),
        )
        self._logger = logger if logger is not None else observability_create_null_logger()
        self._deadline_seconds = float(deadline_seconds)
        self._clock = clock or _resolver_utc_now
        self._detached_tasks: set[asyncio.Task[Outcome]] = set()

    def resolver_provider_names(self) -> tuple[str, ...]:
        """Return the source names of the raced providers.

        Returns:
            tuple[str, ...]: Provider names in launch order.
        """

        return tuple(provider_name for _, provider_name in self._providers)

    async def resolver_resolve(self, application_id: str) -> ApplicationStatus:
        """Race both providers and map the first completed lookup.

        Args:
            application_id: Application identifier.

        Returns:
            ApplicationStatus: `ApplicationStatusResolved` on success, otherwise
            `ApplicationStatusUnresolved`. Provider failures and deadline expiry
            never raise.

        Raises:
            asyncio.CancelledError: Raised only when the calling task itself is cancelled.
        """

        lookup_context = LookupContext.context_with_timeout(self._deadline_seconds)
        lookup_tasks: dict[asyncio.Task[Outcome], str] = {}
        for provider, provider_name in self._providers:
            lookup_task = asyncio.create_task(
                self._resolver_run_lookup(provider, application_id, lookup_context),
                name=f"status-lookup:{provider_name}:{application_id}",
            )
            lookup_tasks[lookup_task] = provider_name

        winning_task: asyncio.Task[Outcome] | None = None
        try:
            done_tasks, _ = await asyncio.wait(
                lookup_tasks,
                timeout=lookup_context.context_remaining_seconds(),
                return_when=asyncio.FIRST_COMPLETED,
            )
            winning_task = next((task for task in lookup_tasks if task in done_tasks), None)
        finally:
            lookup_context.context_cancel()
            for lookup_task, provider_name in lookup_tasks.items():
                if lookup_task is not winning_task:
                    self._resolver_detach_task(lookup_task, provider_name, application_id)

        if winning_task is None:
            self._logger.error(
                "status_resolve_deadline_expired",
                application_id=application_id,
                deadline_seconds=self._deadline_seconds,
                providers=list(self.resolver_provider_names()),
            )
            return ApplicationStatusUnresolved(last_attempt_at_utc=self._clock(), retry_count=self._NOT_RETRIED)

        return self._resolver_map_task_result(
            application_id=application_id,
            lookup_task=winning_task,
            provider_name=lookup_tasks[winning_task],
        )

    async def resolver_drain_detached(self, timeout_seconds: float | None = None) -> int:
        """Wait for detached losing lookups to finish.

        Args:
            timeout_seconds: Optional maximum wait. Lookups still running afterwards stay detached.

        Returns:
            int: Number of detached lookups still running after the wait.
        """

        pending_tasks = set(self._detached_tasks)
        if pending_tasks:
            await asyncio.wait(pending_tasks, timeout=timeout_seconds)
        return sum(1 for task in self._detached_tasks if not task.done())

    async def _resolver_run_lookup(
        self,
        provider: StatusProviderPort,
        application_id: str,
        lookup_context: LookupContext,
    ) -> Outcome:
        return await provider.provider_lookup_status(application_id, lookup_context)

    def _resolver_map_task_result(
        self,
        application_id: str,
        lookup_task: asyncio.Task[Outcome],
        provider_name: str,
    ) -> ApplicationStatus:
        """Map one finished lookup task into an application status.

        Args:
            application_id: Application identifier.
            lookup_task: Finished winning lookup task.
            provider_name: Source name of the provider behind the task.

        Returns:
            ApplicationStatus: Mapped status.
        """

        if lookup_task.cancelled():
            lookup_error: BaseException | None = StatusProviderCancelledError(
                "lookup task was cancelled before producing an outcome",
                provider_name=provider_name,
            )
        else:
            lookup_error = lookup_task.exception()

        if lookup_error is not None:
            self._logger.error(
                "status_provider_lookup_failed",
                application_id=application_id,
                provider=provider_name,
                error_type=type(lookup_error).__name__,
                exc_info=lookup_error,
            )
            return ApplicationStatusUnresolved(last_attempt_at_utc=self._clock(), retry_count=self._NOT_RETRIED)

        return self._resolver_map_outcome(
            application_id=application_id,
            outcome=lookup_task.result(),
            provider_name=provider_name,
        )

    def _resolver_map_outcome(self, application_id: str, outcome: object, provider_name: str) -> ApplicationStatus:
        """Translate a provider outcome into the caller-facing status.

        Args:
            application_id: Requested application identifier.
            outcome: Outcome returned by the winning provider.
            provider_name: Source name of the winning provider.

        Returns:
            ApplicationStatus: Mapped status. Retry advice is marked with
            `retry_count=1`; its delay is not acted on.
        """

        if isinstance(outcome, OutcomeSuccess):
            return ApplicationStatusResolved(application_id=outcome.application_id, status=outcome.status)
        if isinstance(outcome, OutcomeFailure):
            self._logger.info(
                "status_provider_reported_failure",
                application_id=application_id,
                provider=provider_name,
            )
            return ApplicationStatusUnresolved(last_attempt_at_utc=self._clock(), retry_count=self._NOT_RETRIED)
        if isinstance(outcome, OutcomeRetry):
            self._logger.info(
                "status_provider_advised_retry",
                application_id=application_id,
                provider=provider_name,
                retry_delay_seconds=outcome.delay_seconds,
            )
            return ApplicationStatusUnresolved(last_attempt_at_utc=self._clock(), retry_count=self._RETRY_ADVISED)

        self._logger.warning(
            "status_resolve_unrecognized_outcome",
            application_id=application_id,
            provider=provider_name,
            outcome_type=type(outcome).__name__,
        )
        return ApplicationStatusUnresolved(last_attempt_at_utc=None, retry_count=self._NOT_RETRIED)

    def _resolver_detach_task(self, lookup_task: asyncio.Task[Outcome], provider_name: str, application_id: str) -> None:
        """Cancel a losing lookup and keep it referenced until it finishes."""

        if not lookup_task.done():
            lookup_task.cancel()
            self._detached_tasks.add(lookup_task)
        lookup_task.add_done_callback(
            functools.partial(
                self._resolver_observe_detached_task,
                provider_name=provider_name,
                application_id=application_id,
            )
        )

    def _resolver_observe_detached_task(
        self,
        lookup_task: asyncio.Task[Outcome],
        provider_name: str,
        application_id: str,
    ) -> None:
        # Every detached result is consumed here, never by the caller.
        self._detached_tasks.discard(lookup_task)
        if lookup_task.cancelled():
            return
        lookup_error = lookup_task.exception()
        if lookup_error is None or isinstance(lookup_error, StatusProviderCancelledError):
            return
        self._logger.warning(
            "status_provider_detached_failure",
            application_id=application_id,
            provider=provider_name,
            error_type=type(lookup_error).__name__,
            exc_info=lookup_error,
        )
