"""Event ports — abstract interfaces for event publishing."""

from cachefly.events.ports.outbound import EventHandler, EventPublisher

__all__ = ["EventHandler", "EventPublisher"]
