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
"""cachefly store — map-like backing stores behind a cache adapter."""

from cachefly.store.adapters.generic import GenericStoreAdapter
from cachefly.store.adapters.map_store import MapStore
from cachefly.store.ports.outbound import MapLikeStore, StoreAdapter
from cachefly.store.properties import StoreProperties
from cachefly.store.types import (
    CacheEntry,
    GenericStoreOptions,
    KeyPrefixData,
    Namespace,
    StoredRecord,
)

__all__ = [
    "CacheEntry",
    "GenericStoreAdapter",
    "GenericStoreOptions",
    "KeyPrefixData",
    "MapLikeStore",
    "MapStore",
    "Namespace",
    "StoreAdapter",
    "StoreProperties",
    "StoredRecord",
]
