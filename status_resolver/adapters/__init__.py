"""Adapter layer package for upstream status provider boundaries."""

from .interfaces import LookupContext, StatusProviderPort
from .provider_errors import (
    StatusProviderCancelledError,
    StatusProviderConnectionError,
    StatusProviderError,
    StatusProviderTimeoutError,
)
from .simulated_provider import SimulatedStatusProvider

__all__ = [
    "LookupContext",
    "SimulatedStatusProvider",
    "StatusProviderCancelledError",
    "StatusProviderConnectionError",
    "StatusProviderError",
    "StatusProviderPort",
    "StatusProviderTimeoutError",
]
