"""cachefly logging — hexagonal logging port and structlog adapter."""

from cachefly.logging.port import LoggingPort
from cachefly.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
