"""Resolver layer package for racing redundant status providers."""

from .interfaces import StatusResolverPort
from .status_resolver import StatusResolver

__all__ = ["StatusResolver", "StatusResolverPort"]
