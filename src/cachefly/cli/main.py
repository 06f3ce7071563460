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
"""cachefly CLI — benchmarks and diagnostics."""

from __future__ import annotations

import click

from cachefly.cli.bench import bench_command
from cachefly.cli.info import info_command
from cachefly.core.config import Config
from cachefly.logging.structlog_adapter import StructlogAdapter


@click.group()
@click.version_option(package_name="cachefly")
@click.option("--log-level", default=None, help="Root log level (overrides cachefly.logging.level.root).")
def cli(log_level: str | None) -> None:
    """cachefly — passthrough cache backends for map-like stores."""
    config = Config.from_file("cachefly.yaml")
    if log_level:
        config = config.merge({"cachefly": {"logging": {"level": {"root": log_level}}}})
    StructlogAdapter().configure(config)


cli.add_command(bench_command, name="bench")
cli.add_command(info_command, name="info")
