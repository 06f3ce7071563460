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
"""Tests for LoggingPort and StructlogAdapter."""

import logging
from typing import Any

from cachefly.core.config import Config
from cachefly.logging.port import LoggingPort
from cachefly.logging.structlog_adapter import StructlogAdapter


class TestLoggingPort:
    def test_structlog_adapter_conforms(self):
        assert isinstance(StructlogAdapter(), LoggingPort)

    def test_non_conforming_class_is_not_instance(self):
        class Incomplete:
            def get_logger(self, name: str) -> Any:
                pass

        assert not isinstance(Incomplete(), LoggingPort)


class TestStructlogAdapterConfigure:
    def test_configure_with_defaults(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        assert adapter._root_level == "INFO"
        assert adapter._format == "console"

    def test_configure_reads_levels_and_format(self):
        adapter = StructlogAdapter()
        config = Config({
            "cachefly": {
                "logging": {
                    "format": "JSON",
                    "level": {"root": "debug", "cachefly.store": "warning"},
                }
            }
        })
        adapter.configure(config)
        assert adapter._root_level == "DEBUG"
        assert adapter._format == "json"
        assert logging.getLogger("cachefly.store").level == logging.WARNING

    def test_get_logger(self):
        logger = StructlogAdapter().get_logger("cachefly.test")
        assert hasattr(logger, "info")

    def test_set_level(self):
        StructlogAdapter().set_level("cachefly.custom", "error")
        assert logging.getLogger("cachefly.custom").level == logging.ERROR
