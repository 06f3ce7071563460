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
"""'cachefly info' — Display library and environment information."""

from __future__ import annotations

import platform
import sys

import click
from rich.table import Table

from cachefly import __version__
from cachefly.cli.console import console
from cachefly.core.config import Config
from cachefly.store.properties import StoreProperties


@click.command()
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None, help="YAML or TOML config file.")
def info_command(config_path: str | None) -> None:
    """Display cachefly version, environment and effective store settings."""
    console.print(f"\n[cachefly]cachefly[/cachefly] [dim]v{__version__}[/dim]\n")

    env_table = Table(title="Environment", show_header=False, border_style="dim")
    env_table.add_column("Key", style="info")
    env_table.add_column("Value")
    env_table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    env_table.add_row("Platform", platform.platform())
    console.print(env_table)

    config = Config.from_file(config_path or "cachefly.yaml")
    properties = config.bind(StoreProperties)

    store_table = Table(title="\nStore Settings", show_header=False, border_style="dim")
    store_table.add_column("Key", style="info")
    store_table.add_column("Value")
    store_table.add_row("namespace", str(properties.namespace))
    store_table.add_row("key_separator", repr(properties.key_separator))
    store_table.add_row("ttl (ms)", str(properties.ttl))
    console.print(store_table)
    console.print()
