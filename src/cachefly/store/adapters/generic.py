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
"""Store adapter that turns any map-like container into a cache backend."""

from __future__ import annotations

import asyncio
import time
from collections.abc import AsyncIterator, Iterable, Mapping, MutableMapping, Sequence
from typing import Any

import structlog

from cachefly.events.adapters.memory import InMemoryEventBus
from cachefly.events.ports.outbound import EventHandler, EventPublisher
from cachefly.events.types import ERROR_EVENT
from cachefly.kernel.exceptions import ConfigurationException, UnsupportedOperationException
from cachefly.store.adapters.map_store import MapStore
from cachefly.store.ports.outbound import MapLikeStore
from cachefly.store.types import (
    DEFAULT_KEY_SEPARATOR,
    CacheEntry,
    GenericStoreOptions,
    KeyPrefixData,
    Namespace,
    StoredRecord,
    Ttl,
    ttl_to_millis,
)

logger = structlog.get_logger("cachefly.store")


def _now_ms() -> float:
    return time.time() * 1000


def _as_map_like(store: MapLikeStore | MutableMapping[str, Any]) -> MapLikeStore:
    if isinstance(store, MapLikeStore):
        return store
    if isinstance(store, MutableMapping):
        return MapStore(store)
    raise TypeError(f"Expected a map-like store or MutableMapping, got {type(store).__name__}")


class GenericStoreAdapter:
    """Cache backend over an in-memory, map-like container.

    Keys are composed as ``{namespace}{separator}{key}`` when a namespace is
    set. Values are wrapped in a :class:`StoredRecord` and kept by identity;
    nothing is serialized. Expired records are removed lazily, by the read
    that finds them (``get``, ``get_many``, ``has``).

    Errors raised by the backing store propagate to the caller, except in
    :meth:`delete_many`, which reports the first one as an ``"error"`` event
    on :attr:`events` and returns ``False``.

    The namespace may be a zero-argument callable; it is invoked on every
    access, so a rotating namespace needs no adapter mutation.
    """

    def __init__(
        self,
        store: MapLikeStore | MutableMapping[str, Any],
        options: GenericStoreOptions | None = None,
        *,
        events: EventPublisher | None = None,
    ) -> None:
        self._store = _as_map_like(store)
        self._options = options
        self._events: EventPublisher = events if events is not None else InMemoryEventBus()
        self._namespace: Namespace = None
        self._key_separator = DEFAULT_KEY_SEPARATOR

        if options is not None:
            if options.key_separator:
                self._key_separator = options.key_separator
            if options.namespace:
                self._namespace = options.namespace

    # -- accessors ----------------------------------------------------------

    @property
    def store(self) -> MapLikeStore:
        return self._store

    @store.setter
    def store(self, store: MapLikeStore | MutableMapping[str, Any]) -> None:
        self._store = _as_map_like(store)

    @property
    def key_separator(self) -> str:
        return self._key_separator

    @key_separator.setter
    def key_separator(self, separator: str) -> None:
        if not separator:
            raise ConfigurationException(
                "key_separator must not be empty",
                code="STORE_CONFIG_001",
            )
        self._key_separator = separator

    @property
    def opts(self) -> GenericStoreOptions | None:
        return self._options

    @property
    def events(self) -> EventPublisher:
        return self._events

    @property
    def namespace(self) -> str | None:
        return self.get_namespace()

    @namespace.setter
    def namespace(self, namespace: Namespace) -> None:
        self._namespace = namespace

    def get_namespace(self) -> str | None:
        if callable(self._namespace):
            return self._namespace()
        return self._namespace

    def set_namespace(self, namespace: Namespace) -> None:
        self._namespace = namespace

    def subscribe(self, event_type_pattern: str, handler: EventHandler) -> None:
        self._events.subscribe(event_type_pattern, handler)

    # -- key composition ----------------------------------------------------

    def get_key_prefix(self, key: str, namespace: str | None) -> str:
        if namespace:
            return f"{namespace}{self._key_separator}{key}"
        return key

    def get_key_prefix_data(self, key: str) -> KeyPrefixData:
        """Split a composite key on the first separator.

        The tail is rejoined, so raw keys may contain the separator; a
        namespace containing it will not round-trip.
        """
        if self._key_separator in key:
            namespace, *rest = key.split(self._key_separator)
            return KeyPrefixData(key=self._key_separator.join(rest), namespace=namespace)
        return KeyPrefixData(key=key)

    # -- operations ---------------------------------------------------------

    def _read(self, key_prefix: str, now: float) -> StoredRecord | None:
        data = self._store.get(key_prefix)
        if data is None:
            return None

        if data.is_expired(now):
            self._store.delete(key_prefix)
            return None

        return data

    async def get(self, key: str) -> StoredRecord | None:
        """Return the live record for *key*, evicting it if it has expired."""
        key_prefix = self.get_key_prefix(key, self.get_namespace())
        return self._read(key_prefix, _now_ms())

    async def get_many(self, keys: Sequence[str]) -> list[StoredRecord | None]:
        """Look up *keys*; the result is index-aligned, ``None`` for misses."""
        now = _now_ms()
        namespace = self.get_namespace()
        return [self._read(self.get_key_prefix(key, namespace), now) for key in keys]

    async def set(self, key: str, value: Any, ttl: Ttl | None = None) -> bool:
        """Store *value* under *key*, replacing any existing record.

        Only a positive *ttl* (milliseconds or timedelta) sets an expiry.
        """
        key_prefix = self.get_key_prefix(key, self.get_namespace())
        ttl_ms = ttl_to_millis(ttl)
        expires = _now_ms() + ttl_ms if ttl_ms is not None and ttl_ms > 0 else None
        self._store.set(key_prefix, StoredRecord(value=value, expires=expires), ttl_ms)
        return True

    async def set_many(self, entries: Iterable[CacheEntry | Mapping[str, Any]]) -> None:
        """Set each entry in order.

        Stops at the first failure and re-raises it. Entries written before
        the failure are kept. Other tasks may run between entries.
        """
        for entry in entries:
            if isinstance(entry, Mapping):
                entry = CacheEntry(**entry)
            await self.set(entry.key, entry.value, entry.ttl)
            await asyncio.sleep(0)

    async def delete(self, key: str) -> bool:
        key_prefix = self.get_key_prefix(key, self.get_namespace())
        return self._store.delete(key_prefix)

    async def delete_many(self, keys: Iterable[str]) -> bool:
        """Delete *keys* in order.

        On the first store error the remaining keys are skipped, the error is
        published as an ``"error"`` event and ``False`` is returned. Keys
        deleted before the failure stay deleted.
        """
        try:
            for key in keys:
                key_prefix = self.get_key_prefix(key, self.get_namespace())
                self._store.delete(key_prefix)
        except Exception as exc:
            logger.warning(
                "store_delete_many_failed",
                error=repr(exc),
                subscribed=self._events.has_subscribers(ERROR_EVENT),
            )
            await self._events.publish(ERROR_EVENT, exc, source=type(self).__name__)
            return False

        return True

    async def clear(self) -> None:
        self._store.clear()

    async def has(self, key: str) -> bool:
        """True when *key* holds a live record whose value is truthy.

        A live record holding ``0``, ``""``, ``False`` or ``None`` reports
        ``False``, the same as a missing key.
        """
        record = await self.get(key)
        return record is not None and bool(record.value)

    def iterator(self, namespace: str | None = None) -> AsyncIterator[tuple[str, Any]]:
        raise UnsupportedOperationException(
            "Iteration is not supported by GenericStoreAdapter",
            code="STORE_ITERATOR_UNSUPPORTED",
            context={"namespace": namespace},
        )
