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
"""Tests for MapStore and the MapLikeStore protocol."""

from collections import OrderedDict
from typing import Any

from cachefly.store.adapters.map_store import MapStore
from cachefly.store.ports.outbound import MapLikeStore


class TestMapStore:
    def test_implements_map_like_store(self):
        assert isinstance(MapStore(), MapLikeStore)

    def test_plain_dict_is_not_map_like(self):
        assert not isinstance({}, MapLikeStore)

    def test_set_get_has(self):
        store = MapStore()
        store.set("k", "v", ttl=100)
        assert store.get("k") == "v"
        assert store.has("k") is True
        assert store.get("missing") is None
        assert store.has("missing") is False

    def test_delete_reports_presence(self):
        store = MapStore()
        store.set("k", "v")
        assert store.delete("k") is True
        assert store.delete("k") is False

    def test_clear_and_len(self):
        store = MapStore()
        store.set("a", 1)
        store.set("b", 2)
        assert len(store) == 2
        store.clear()
        assert len(store) == 0

    def test_shares_given_mapping(self):
        backing: OrderedDict[str, Any] = OrderedDict()
        store = MapStore(backing)
        store.set("k", 1)
        assert backing == {"k": 1}
        assert store.data is backing
