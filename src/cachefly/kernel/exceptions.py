"""Unified exception hierarchy for cachefly.

All library exceptions inherit from CacheflyException so callers can catch
one type for everything raised by cachefly itself.

Failures raised by a backing store are *not* wrapped: they propagate to the
caller unchanged, except inside ``delete_many`` where the first one is
reported as an ``"error"`` event instead.

Categories:
- ConfigurationException: invalid store or cache configuration
- InfrastructureException: serialization and storage failures
- UnsupportedOperationException: capability not offered by a backend
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class CacheflyException(Exception):
    """Base exception for all cachefly errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "STORE_001").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class ConfigurationException(CacheflyException):
    """A configuration value is missing or invalid."""


class UnsupportedOperationException(CacheflyException, NotImplementedError):
    """The backend does not offer the requested capability."""


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(CacheflyException):
    """Storage and encoding failures raised by cachefly itself."""


class SerializationException(InfrastructureException):
    """A value could not be encoded for, or decoded from, the store."""
