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
"""'cachefly bench' — Measure cache throughput."""

from __future__ import annotations

import asyncio
import json

import click
from rich.table import Table

from cachefly.benchmark import (
    DEFAULT_ITERATIONS,
    BenchmarkResult,
    passthrough_cache,
    run_benchmarks,
    serializing_cache,
    summarize,
)
from cachefly.cli.console import console


def _results_table(results: list[BenchmarkResult]) -> Table:
    table = Table(title="Benchmark Results", border_style="dim")
    table.add_column("Operation", style="info")
    table.add_column("Duration (ms)", justify="right")
    table.add_column("Ops/sec", justify="right")
    for result in results:
        table.add_row(result.name, f"{result.duration_ms:.2f}", f"{result.ops_per_sec:,}")
    return table


@click.command()
@click.option("--iterations", "-n", default=DEFAULT_ITERATIONS, show_default=True, type=click.IntRange(min=1))
@click.option(
    "--passthrough/--serialize",
    default=True,
    show_default=True,
    help="Pass values by identity, or round-trip them through the JSON serializer.",
)
@click.option("--format", "output_format", type=click.Choice(["console", "json"]), default="console", show_default=True)
def bench_command(iterations: int, passthrough: bool, output_format: str) -> None:
    """Run set/get/has throughput benchmarks against an in-memory cache."""
    factory = passthrough_cache if passthrough else serializing_cache
    results = asyncio.run(run_benchmarks(iterations, factory))
    summary = summarize(results)

    if output_format == "json":
        payload = {
            "iterations": iterations,
            "passthrough": passthrough,
            "results": [
                {"name": r.name, "duration_ms": r.duration_ms, "ops_per_sec": r.ops_per_sec} for r in results
            ],
            "summary": {
                "total_operations": summary.total_operations,
                "total_duration_ms": summary.total_duration_ms,
                "average_ops_per_sec": summary.average_ops_per_sec,
            },
        }
        click.echo(json.dumps(payload, indent=2))
        return

    mode = "passthrough" if passthrough else "serialized"
    console.print(f"\n[cachefly]cachefly benchmarks[/cachefly] [dim]({mode}, {iterations:,} iterations)[/dim]\n")
    console.print(_results_table(results))
    console.print("\n[info]Summary:[/info]")
    console.print(f"  Total operations: {summary.total_operations:,}")
    console.print(f"  Total duration: {summary.total_duration_ms:.2f} ms")
    console.print(f"  Average throughput: {summary.average_ops_per_sec:,} ops/sec\n")
