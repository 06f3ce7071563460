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
"""Tests for create_cache and create_cache_from_config."""

from typing import Any

import pytest

from cachefly.cache.facade import Cache
from cachefly.cache.factory import create_cache, create_cache_from_config
from cachefly.core.config import Config
from cachefly.kernel.exceptions import ConfigurationException
from cachefly.store.adapters.generic import GenericStoreAdapter
from cachefly.store.adapters.map_store import MapStore
from cachefly.store.types import GenericStoreOptions


class TestCreateCache:
    def test_builds_passthrough_cache_over_adapter(self):
        cache = create_cache({})
        assert isinstance(cache, Cache)
        assert isinstance(cache.store, GenericStoreAdapter)
        assert cache.passthrough_values is True
        assert cache.use_key_prefix is False

    async def test_adapter_owns_key_prefixing(self):
        data: dict[str, Any] = {}
        cache = create_cache(data, GenericStoreOptions(namespace="users"))
        await cache.set("42", "alice")
        assert list(data) == ["users::42"]
        assert await cache.get("42") == "alice"

    async def test_values_returned_by_identity(self):
        cache = create_cache(MapStore())
        value = object()
        await cache.set("k", value)
        assert await cache.get("k") is value

    async def test_forwards_cache_kwargs(self):
        data: dict[str, Any] = {}
        cache = create_cache(data, ttl=5000)
        assert cache.ttl == 5000
        await cache.set("k", 1)
        assert data["k"].expires is not None

    async def test_has_quirk_visible_through_cache(self):
        cache = create_cache({})
        for key, value in (("zero", 0), ("empty", ""), ("no", False)):
            await cache.set(key, value)
            assert await cache.has(key) is False
            assert await cache.get(key) == value


class TestCreateCacheFromConfig:
    async def test_reads_store_section(self):
        config = Config({"cachefly": {"store": {"namespace": "cfg", "key_separator": "|", "ttl": 100}}})
        data: dict[str, Any] = {}
        cache = create_cache_from_config(data, config)
        await cache.set("k", 1)
        assert list(data) == ["cfg|k"]
        assert cache.ttl == 100

    def test_loads_from_yaml_file(self, tmp_path):
        config_file = tmp_path / "cachefly.yaml"
        config_file.write_text("cachefly:\n  store:\n    namespace: from-file\n")
        cache = create_cache_from_config({}, Config.from_file(config_file))
        assert cache.store.namespace == "from-file"

    def test_invalid_separator_rejected(self):
        config = Config({"cachefly": {"store": {"key_separator": ""}}})
        with pytest.raises(ConfigurationException):
            create_cache_from_config({}, config)
