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
"""Tests for the in-memory event bus."""

import pytest

from cachefly.events.adapters.memory import InMemoryEventBus
from cachefly.events.ports.outbound import EventPublisher
from cachefly.events.types import EventEnvelope


class TestInMemoryEventBus:
    def test_implements_publisher_port(self):
        assert isinstance(InMemoryEventBus(), EventPublisher)

    async def test_publish_and_subscribe(self):
        bus = InMemoryEventBus()
        received: list[EventEnvelope] = []

        async def handler(event: EventEnvelope) -> None:
            received.append(event)

        bus.subscribe("error", handler)
        error = RuntimeError("boom")
        await bus.publish("error", error, source="test")

        assert len(received) == 1
        assert received[0].event_type == "error"
        assert received[0].payload is error
        assert received[0].source == "test"

    async def test_wildcard_subscription(self):
        bus = InMemoryEventBus()
        received: list[EventEnvelope] = []

        async def handler(event: EventEnvelope) -> None:
            received.append(event)

        bus.subscribe("store.*", handler)
        await bus.publish("store.error", 1)
        await bus.publish("store.cleared", 2)
        await bus.publish("error", 3)

        assert [e.payload for e in received] == [1, 2]

    async def test_no_subscribers(self):
        bus = InMemoryEventBus()
        await bus.publish("error", ValueError("unobserved"))
        assert bus.has_subscribers("error") is False

    async def test_unsubscribe(self):
        bus = InMemoryEventBus()
        received: list[EventEnvelope] = []

        async def handler(event: EventEnvelope) -> None:
            received.append(event)

        bus.subscribe("error", handler)
        assert bus.has_subscribers("error") is True
        assert bus.unsubscribe("error", handler) is True
        assert bus.unsubscribe("error", handler) is False

        await bus.publish("error", "x")
        assert received == []

    async def test_handler_exception_propagates(self):
        bus = InMemoryEventBus()

        async def handler(event: EventEnvelope) -> None:
            raise RuntimeError("handler failed")

        bus.subscribe("error", handler)
        with pytest.raises(RuntimeError, match="handler failed"):
            await bus.publish("error", None)

    async def test_envelope_metadata(self):
        bus = InMemoryEventBus()
        received: list[EventEnvelope] = []

        async def handler(event: EventEnvelope) -> None:
            received.append(event)

        bus.subscribe("error", handler)
        await bus.publish("error", "payload")

        envelope = received[0]
        assert envelope.event_id
        assert envelope.timestamp is not None
