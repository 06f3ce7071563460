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
"""Outbound port protocol for event publishing."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, runtime_checkable

from cachefly.events.types import EventEnvelope

EventHandler = Callable[[EventEnvelope], Awaitable[None]]


@runtime_checkable
class EventPublisher(Protocol):
    """Abstract event publisher interface."""

    def subscribe(self, event_type_pattern: str, handler: EventHandler) -> None: ...

    def unsubscribe(self, event_type_pattern: str, handler: EventHandler) -> bool: ...

    def has_subscribers(self, event_type: str) -> bool: ...

    async def publish(self, event_type: str, payload: Any, source: str = "") -> None: ...
