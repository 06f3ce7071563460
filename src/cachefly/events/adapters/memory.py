# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""In-memory event bus for single-process applications."""

from __future__ import annotations

import fnmatch
from typing import Any

from cachefly.events.ports.outbound import EventHandler
from cachefly.events.types import EventEnvelope


class InMemoryEventBus:
    """In-memory event bus using pattern-matched subscriptions.

    Supports wildcard patterns (e.g. "store.*" matches "store.error").
    Handlers run sequentially in subscription order; an exception raised by
    a handler propagates to the publisher.
    """

    def __init__(self) -> None:
        self._handlers: list[tuple[str, EventHandler]] = []

    def subscribe(self, event_type_pattern: str, handler: EventHandler) -> None:
        self._handlers.append((event_type_pattern, handler))

    def unsubscribe(self, event_type_pattern: str, handler: EventHandler) -> bool:
        """Remove a subscription. Returns True if it was registered."""
        try:
            self._handlers.remove((event_type_pattern, handler))
        except ValueError:
            return False
        return True

    def has_subscribers(self, event_type: str) -> bool:
        return any(fnmatch.fnmatch(event_type, pattern) for pattern, _ in self._handlers)

    async def publish(self, event_type: str, payload: Any, source: str = "") -> None:
        """Publish an event to all matching subscribers."""
        envelope = EventEnvelope(event_type=event_type, payload=payload, source=source)
        for pattern, handler in list(self._handlers):
            if fnmatch.fnmatch(event_type, pattern):
                await handler(envelope)
