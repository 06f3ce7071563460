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
"""Cache façade delegating storage to a pluggable store adapter."""

from __future__ import annotations

import time
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from cachefly.cache.serializers import JsonSerializer, Serializer
from cachefly.events.adapters.memory import InMemoryEventBus
from cachefly.events.ports.outbound import EventHandler, EventPublisher
from cachefly.events.types import ERROR_EVENT, EventEnvelope
from cachefly.store.adapters.generic import GenericStoreAdapter
from cachefly.store.adapters.map_store import MapStore
from cachefly.store.ports.outbound import StoreAdapter
from cachefly.store.types import CacheEntry, StoredRecord, Ttl

DEFAULT_NAMESPACE = "cachefly"


class Cache:
    """Key-value cache with optional key prefixing and value serialization.

    Storage is delegated to a :class:`StoreAdapter` (an in-memory
    :class:`GenericStoreAdapter` by default). With ``use_key_prefix`` the
    façade prefixes keys as ``{namespace}:{key}`` itself; turn it off when the
    adapter already namespaces keys. With ``passthrough_values`` values reach
    the store by identity and the serializer is never called.

    ``"error"`` events published by the adapter are re-published on the
    façade's own event bus, so one subscription covers both. Passing the
    adapter's bus as ``events`` shares a single stream instead. Call
    :meth:`close` (or use ``async with``) before discarding a façade whose
    adapter lives on.
    """

    def __init__(
        self,
        store: StoreAdapter | None = None,
        *,
        namespace: str | None = DEFAULT_NAMESPACE,
        ttl: Ttl | None = None,
        use_key_prefix: bool = True,
        passthrough_values: bool = False,
        serializer: Serializer | None = None,
        events: EventPublisher | None = None,
    ) -> None:
        self._store: StoreAdapter = store if store is not None else GenericStoreAdapter(MapStore())
        self._namespace = namespace
        self._ttl = ttl
        self._use_key_prefix = use_key_prefix
        self._passthrough_values = passthrough_values
        self._serializer: Serializer = serializer if serializer is not None else JsonSerializer()
        self._events: EventPublisher = events if events is not None else InMemoryEventBus()

        # A bus shared with the adapter already delivers its errors here.
        self._forwarding_from: EventPublisher | None = None
        store_events = getattr(self._store, "events", None)
        if isinstance(store_events, EventPublisher) and store_events is not self._events:
            store_events.subscribe(ERROR_EVENT, self._forward_error)
            self._forwarding_from = store_events

    @property
    def store(self) -> StoreAdapter:
        return self._store

    @property
    def namespace(self) -> str | None:
        return self._namespace

    @property
    def ttl(self) -> Ttl | None:
        return self._ttl

    @property
    def use_key_prefix(self) -> bool:
        return self._use_key_prefix

    @property
    def passthrough_values(self) -> bool:
        return self._passthrough_values

    @property
    def serializer(self) -> Serializer:
        return self._serializer

    @property
    def events(self) -> EventPublisher:
        return self._events

    def subscribe(self, event_type_pattern: str, handler: EventHandler) -> None:
        self._events.subscribe(event_type_pattern, handler)

    def close(self) -> None:
        """Stop forwarding adapter errors. Safe to call more than once.

        The adapter and its backing store are left untouched, so they can be
        handed to another :class:`Cache`.
        """
        if self._forwarding_from is not None:
            self._forwarding_from.unsubscribe(ERROR_EVENT, self._forward_error)
            self._forwarding_from = None

    async def __aenter__(self) -> Cache:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    async def _forward_error(self, envelope: EventEnvelope) -> None:
        await self._events.publish(ERROR_EVENT, envelope.payload, source=envelope.source)

    # -- keys and values ----------------------------------------------------

    def _key(self, key: str) -> str:
        if self._use_key_prefix and self._namespace:
            return f"{self._namespace}:{key}"
        return key

    def _encode(self, value: Any) -> Any:
        if self._passthrough_values:
            return value
        return self._serializer.dumps(value)

    def _decode(self, data: Any) -> Any:
        if self._passthrough_values:
            return data
        return self._serializer.loads(data)

    async def _unwrap(self, key: str, record: StoredRecord | None, default: Any) -> Any:
        if record is None:
            return default
        # Adapters without lazy eviction may hand back stale records.
        if record.is_expired(time.time() * 1000):
            await self._store.delete(key)
            return default
        return self._decode(record.value)

    # -- operations ---------------------------------------------------------

    async def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under *key*, or *default* on a miss."""
        prefixed = self._key(key)
        record = await self._store.get(prefixed)
        return await self._unwrap(prefixed, record, default)

    async def get_many(self, keys: Sequence[str]) -> list[Any]:
        """Values for *keys*, index-aligned, ``None`` for misses."""
        prefixed = [self._key(key) for key in keys]
        records = await self._store.get_many(prefixed)
        return [await self._unwrap(key, record, None) for key, record in zip(prefixed, records, strict=True)]

    async def set(self, key: str, value: Any, ttl: Ttl | None = None) -> bool:
        """Store *value*; *ttl* falls back to the cache-wide default."""
        effective_ttl = ttl if ttl is not None else self._ttl
        return await self._store.set(self._key(key), self._encode(value), effective_ttl)

    async def set_many(self, entries: Iterable[CacheEntry | Mapping[str, Any]]) -> None:
        batch: list[CacheEntry] = []
        for entry in entries:
            if isinstance(entry, Mapping):
                entry = CacheEntry(**entry)
            batch.append(
                CacheEntry(
                    key=self._key(entry.key),
                    value=self._encode(entry.value),
                    ttl=entry.ttl if entry.ttl is not None else self._ttl,
                )
            )
        await self._store.set_many(batch)

    async def delete(self, key: str) -> bool:
        return await self._store.delete(self._key(key))

    async def delete_many(self, keys: Iterable[str]) -> bool:
        """Delete *keys*; ``False`` means the batch stopped early (see ``"error"`` events)."""
        return await self._store.delete_many([self._key(key) for key in keys])

    async def has(self, key: str) -> bool:
        return await self._store.has(self._key(key))

    async def clear(self) -> None:
        await self._store.clear()
