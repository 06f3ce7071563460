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
"""Factories wiring a map-like store into a passthrough cache façade."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

import structlog

from cachefly.cache.facade import Cache
from cachefly.core.config import Config
from cachefly.store.adapters.generic import GenericStoreAdapter
from cachefly.store.ports.outbound import MapLikeStore
from cachefly.store.properties import StoreProperties
from cachefly.store.types import GenericStoreOptions

logger = structlog.get_logger("cachefly.cache")


def create_cache(
    store: MapLikeStore | MutableMapping[str, Any],
    options: GenericStoreOptions | None = None,
    **cache_kwargs: Any,
) -> Cache:
    """Create a :class:`Cache` backed by *store* through a :class:`GenericStoreAdapter`.

    The adapter already namespaces keys, so the façade's own key prefixing
    is turned off. Values are passed through by identity, skipping
    serialization on every read and write. Only worth it for stores that
    hold values directly rather than as encoded bytes.

    Args:
        store: A map-like store, or any ``MutableMapping`` (wrapped in a
            :class:`MapStore`).
        options: Namespace and key separator for the adapter.
        **cache_kwargs: Extra keyword arguments for :class:`Cache`
            (``ttl``, ``events``).
    """
    adapter = GenericStoreAdapter(store, options)
    return Cache(store=adapter, use_key_prefix=False, passthrough_values=True, **cache_kwargs)


def create_cache_from_config(
    store: MapLikeStore | MutableMapping[str, Any],
    config: Config,
) -> Cache:
    """Create a passthrough cache using ``cachefly.store.*`` settings."""
    properties = config.bind(StoreProperties)
    logger.debug(
        "cache_factory_create",
        namespace=properties.namespace,
        key_separator=properties.key_separator,
        ttl=properties.ttl,
    )
    return create_cache(store, properties.to_options(), ttl=properties.ttl)
