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
"""Tests for the benchmark scenarios."""

import pytest

from cachefly.benchmark import (
    BenchmarkResult,
    BenchmarkSummary,
    passthrough_cache,
    run_benchmarks,
    serializing_cache,
    summarize,
)


class TestRunBenchmarks:
    async def test_runs_all_scenarios(self):
        results = await run_benchmarks(iterations=20)
        assert [r.name for r in results] == [
            "Set primitive values",
            "Get primitive values",
            "Set string values",
            "Get string values",
            "Set object values",
            "Get object values",
            "Has operations",
        ]
        assert all(r.iterations == 20 for r in results)
        assert all(r.duration_ms >= 0 for r in results)

    async def test_serializing_factory(self):
        results = await run_benchmarks(iterations=5, cache_factory=serializing_cache)
        assert len(results) == 7

    async def test_rejects_non_positive_iterations(self):
        with pytest.raises(ValueError):
            await run_benchmarks(iterations=0)

    def test_factories(self):
        assert passthrough_cache().passthrough_values is True
        assert serializing_cache().passthrough_values is False


class TestResultMath:
    def test_ops_per_sec(self):
        assert BenchmarkResult("x", iterations=1000, duration_ms=500.0).ops_per_sec == 2000

    def test_zero_duration(self):
        assert BenchmarkResult("x", iterations=10, duration_ms=0.0).ops_per_sec == 0

    def test_summarize(self):
        summary = summarize([
            BenchmarkResult("a", iterations=100, duration_ms=10.0),
            BenchmarkResult("b", iterations=100, duration_ms=30.0),
        ])
        assert summary == BenchmarkSummary(total_operations=200, total_duration_ms=40.0)
        assert summary.average_ops_per_sec == 5000
