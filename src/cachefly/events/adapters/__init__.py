"""Event adapters — concrete event bus implementations."""

from cachefly.events.adapters.memory import InMemoryEventBus

__all__ = ["InMemoryEventBus"]
