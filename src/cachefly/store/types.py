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
"""Store record and key types."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, TypeAlias

DEFAULT_KEY_SEPARATOR = "::"

Namespace: TypeAlias = str | Callable[[], str] | None
"""A fixed namespace string or a zero-argument resolver called on every access."""

Ttl: TypeAlias = int | float | timedelta
"""Relative time-to-live: milliseconds, or a timedelta."""


@dataclass(frozen=True, slots=True)
class StoredRecord:
    """What the adapter keeps in the backing store for each key.

    ``expires`` is an absolute wall-clock time in epoch milliseconds, or
    ``None`` for a record that never expires. The value is held by identity.
    """

    value: Any
    expires: float | None = None

    def is_expired(self, now: float) -> bool:
        return self.expires is not None and now > self.expires


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """One item of a ``set_many`` batch."""

    key: str
    value: Any
    ttl: Ttl | None = None


@dataclass(frozen=True, slots=True)
class KeyPrefixData:
    """A composite key split back into its namespace and raw key."""

    key: str
    namespace: str | None = None


@dataclass(frozen=True)
class GenericStoreOptions:
    """Construction options for :class:`GenericStoreAdapter`."""

    namespace: Namespace = None
    key_separator: str = DEFAULT_KEY_SEPARATOR


def ttl_to_millis(ttl: Ttl | None) -> float | None:
    """Normalise a TTL to milliseconds; ``None`` stays ``None``."""
    if ttl is None:
        return None
    if isinstance(ttl, timedelta):
        return ttl.total_seconds() * 1000
    return ttl
