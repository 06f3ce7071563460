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
"""Store protocols: the map-like backing store and the adapter contract."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterable, Sequence
from typing import Any, Protocol, runtime_checkable

from cachefly.store.types import CacheEntry, StoredRecord, Ttl


@runtime_checkable
class MapLikeStore(Protocol):
    """Any synchronous container keyed by string.

    The adapter treats it as an opaque capability; ``ttl`` is passed through
    on ``set`` for containers that want it and may be ignored.
    """

    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any, ttl: float | None = None) -> None: ...

    def delete(self, key: str) -> bool: ...

    def clear(self) -> None: ...

    def has(self, key: str) -> bool: ...


@runtime_checkable
class StoreAdapter(Protocol):
    """Backend contract expected by :class:`cachefly.cache.Cache`.

    All backends (generic map-like, future network stores) implement this
    protocol so they are interchangeable behind the façade.
    """

    namespace: str | None

    async def get(self, key: str) -> StoredRecord | None: ...

    async def get_many(self, keys: Sequence[str]) -> list[StoredRecord | None]: ...

    async def set(self, key: str, value: Any, ttl: Ttl | None = None) -> bool: ...

    async def set_many(self, entries: Iterable[CacheEntry]) -> None: ...

    async def delete(self, key: str) -> bool: ...

    async def delete_many(self, keys: Iterable[str]) -> bool: ...

    async def has(self, key: str) -> bool: ...

    async def clear(self) -> None: ...

    def iterator(self, namespace: str | None = None) -> AsyncIterator[tuple[str, Any]]: ...
