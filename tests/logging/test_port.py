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
"""Tests for the LoggingPort protocol."""

from typing import Any

import pytest

from msgfly.core.config import Config
from msgfly.logging.port import LoggingPort, configure_logging
from msgfly.logging.structlog_adapter import StructlogAdapter


class TestLoggingPortProtocol:
    def test_conforming_class_is_instance(self):
        class FakeLogging:
            def configure(self, config: Any) -> None:
                pass

            def get_logger(self, name: str) -> Any:
                pass

            def set_level(self, name: str, level: str) -> None:
                pass

        assert isinstance(FakeLogging(), LoggingPort)

    def test_non_conforming_class_is_not_instance(self):
        class Incomplete:
            def get_logger(self, name: str) -> Any:
                pass

        assert not isinstance(Incomplete(), LoggingPort)


class TestConfigureLogging:
    def test_defaults_to_structlog_adapter(self):
        port = configure_logging(Config({}))
        assert isinstance(port, StructlogAdapter)

    def test_configures_given_port(self):
        class Recording:
            def __init__(self) -> None:
                self.configured_with: Config | None = None

            def configure(self, config: Config) -> None:
                self.configured_with = config

            def get_logger(self, name: str) -> Any:
                return None

            def set_level(self, name: str, level: str) -> None:
                pass

        config = Config({"msgfly": {"logging": {"format": "json"}}})
        port = Recording()
        assert configure_logging(config, port) is port
        assert port.configured_with is config

    def test_rejects_non_port(self):
        class NotAPort:
            pass

        with pytest.raises(TypeError, match="LoggingPort"):
            configure_logging(Config({}), NotAPort())  # type: ignore[arg-type]
