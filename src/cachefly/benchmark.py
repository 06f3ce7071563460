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
"""Throughput benchmarks for the cache façade.

Each scenario runs against a fresh cache. "Get" and "has" scenarios are
pre-populated before the clock starts.
"""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from cachefly.cache.facade import Cache
from cachefly.cache.factory import create_cache

DEFAULT_ITERATIONS = 100_000

CacheFactory = Callable[[], Cache]


@dataclass(frozen=True)
class BenchmarkResult:
    name: str
    iterations: int
    duration_ms: float

    @property
    def ops_per_sec(self) -> int:
        if self.duration_ms <= 0:
            return 0
        return round(self.iterations / self.duration_ms * 1000)


@dataclass(frozen=True)
class BenchmarkSummary:
    total_operations: int
    total_duration_ms: float

    @property
    def average_ops_per_sec(self) -> int:
        if self.total_duration_ms <= 0:
            return 0
        return round(self.total_operations / self.total_duration_ms * 1000)


def passthrough_cache() -> Cache:
    return create_cache({})


def serializing_cache() -> Cache:
    return Cache()


def _primitive(i: int) -> Any:
    return i


def _string(i: int) -> Any:
    return f"value{i}"


def _object(i: int) -> Any:
    return {"id": i, "name": f"user{i}"}


async def _timed(name: str, iterations: int, op: Callable[[int], Awaitable[Any]]) -> BenchmarkResult:
    start = time.perf_counter_ns()
    for i in range(iterations):
        await op(i)
    duration_ms = (time.perf_counter_ns() - start) / 1e6
    return BenchmarkResult(name=name, iterations=iterations, duration_ms=duration_ms)


async def _fill(cache: Cache, iterations: int, make_value: Callable[[int], Any]) -> Cache:
    for i in range(iterations):
        await cache.set(f"key{i}", make_value(i))
    return cache


async def run_benchmarks(
    iterations: int = DEFAULT_ITERATIONS,
    cache_factory: CacheFactory = passthrough_cache,
) -> list[BenchmarkResult]:
    """Run the set/get/has scenarios and return one result per scenario."""
    if iterations < 1:
        raise ValueError(f"iterations must be positive, got {iterations}")

    results: list[BenchmarkResult] = []
    for label, make_value in (("primitive", _primitive), ("string", _string), ("object", _object)):
        writer = cache_factory()
        results.append(
            await _timed(f"Set {label} values", iterations, lambda i: writer.set(f"key{i}", make_value(i)))
        )

        reader = await _fill(cache_factory(), iterations, make_value)
        results.append(await _timed(f"Get {label} values", iterations, lambda i: reader.get(f"key{i}")))

    checker = await _fill(cache_factory(), iterations, _primitive)
    results.append(await _timed("Has operations", iterations, lambda i: checker.has(f"key{i}")))
    return results


def summarize(results: list[BenchmarkResult]) -> BenchmarkSummary:
    return BenchmarkSummary(
        total_operations=sum(r.iterations for r in results),
        total_duration_ms=sum(r.duration_ms for r in results),
    )
