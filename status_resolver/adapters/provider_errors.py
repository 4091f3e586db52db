"""Project-native typed exceptions for status provider failures."""

from __future__ import annotations


class StatusProviderError(Exception):
    """Base exception for provider-level status lookup failures.

    Attributes:
        provider_name: Optional source name of the failing provider.
    """

    def __init__(self, message: str, provider_name: str | None = None):
        super().__init__(message)
        self.provider_name = provider_name


class StatusProviderConnectionError(StatusProviderError, ConnectionError):
    """Transport-level connectivity failure during a status lookup."""


class StatusProviderTimeoutError(StatusProviderError, TimeoutError):
    """Transport timeout while waiting for a provider response."""


class StatusProviderCancelledError(StatusProviderError):
    """Lookup abandoned because the shared lookup context was cancelled."""
