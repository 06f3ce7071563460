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
"""Value serializers used by the cache façade when values are not passed through."""

from __future__ import annotations

import json
from typing import Any, Protocol, runtime_checkable

from cachefly.kernel.exceptions import SerializationException


@runtime_checkable
class Serializer(Protocol):
    """Encodes values for the store and decodes them back."""

    def dumps(self, value: Any) -> str: ...

    def loads(self, data: str) -> Any: ...


class JsonSerializer:
    """JSON serializer; the façade default."""

    def dumps(self, value: Any) -> str:
        try:
            return json.dumps(value)
        except (TypeError, ValueError) as exc:
            raise SerializationException(
                f"Cannot serialize value of type {type(value).__name__}",
                code="CACHE_SERIALIZE",
            ) from exc

    def loads(self, data: str) -> Any:
        try:
            return json.loads(data)
        except (TypeError, ValueError) as exc:
            raise SerializationException("Cannot deserialize stored value", code="CACHE_DESERIALIZE") from exc
