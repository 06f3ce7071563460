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
"""MapLikeStore over a plain mutable mapping."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any


class MapStore:
    """Exposes ``get/set/delete/clear/has`` over any ``MutableMapping``.

    A ``dict`` is used when no mapping is given. The mapping is shared, not
    copied, so the caller can inspect it directly.
    """

    def __init__(self, data: MutableMapping[str, Any] | None = None) -> None:
        self._data: MutableMapping[str, Any] = data if data is not None else {}

    @property
    def data(self) -> MutableMapping[str, Any]:
        return self._data

    def get(self, key: str) -> Any:
        return self._data.get(key)

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        self._data[key] = value

    def delete(self, key: str) -> bool:
        if key in self._data:
            del self._data[key]
            return True
        return False

    def clear(self) -> None:
        self._data.clear()

    def has(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)
