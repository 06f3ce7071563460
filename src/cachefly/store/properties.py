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
"""Store configuration properties."""

from __future__ import annotations

from dataclasses import dataclass

from cachefly.core.config import config_properties
from cachefly.kernel.exceptions import ConfigurationException
from cachefly.store.types import DEFAULT_KEY_SEPARATOR, GenericStoreOptions


@config_properties(prefix="cachefly.store")
@dataclass
class StoreProperties:
    """Configuration for the generic store adapter (cachefly.store.*).

    ``ttl`` is the façade's default time-to-live in milliseconds.
    """

    namespace: str | None = None
    key_separator: str = DEFAULT_KEY_SEPARATOR
    ttl: int | None = None

    def to_options(self) -> GenericStoreOptions:
        if not self.key_separator:
            raise ConfigurationException(
                "cachefly.store.key_separator must not be empty",
                code="STORE_CONFIG_001",
            )
        if self.ttl is not None and self.ttl < 0:
            raise ConfigurationException(
                f"cachefly.store.ttl must not be negative, got {self.ttl}",
                code="STORE_CONFIG_002",
                context={"ttl": self.ttl},
            )
        return GenericStoreOptions(namespace=self.namespace, key_separator=self.key_separator)
