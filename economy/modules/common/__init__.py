"""Shared abstractions used across economy modules."""

from .clock import Clock, as_utc, utcnow
from .exceptions import EconomyError, StorageUnavailableError

__all__ = ["Clock", "EconomyError", "StorageUnavailableError", "as_utc", "utcnow"]
