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
"""LoggingPort — the logging contract, and the helper that applies it."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from msgfly.core.config import Config


@runtime_checkable
class LoggingPort(Protocol):
    """Backend that turns the ``msgfly.logging`` section into live loggers.

    ``configure`` is called once at startup; ``set_level`` may be called
    afterwards to adjust a single logger, e.g. ``msgfly.i18n.loader``.
    """

    def configure(self, config: Config) -> None: ...
    def get_logger(self, name: str) -> Any: ...
    def set_level(self, name: str, level: str) -> None: ...


def configure_logging(config: Config, port: LoggingPort | None = None) -> LoggingPort:
    """Configure *port* (structlog by default) from *config* and return it."""
    if port is None:
        from msgfly.logging.structlog_adapter import StructlogAdapter

        port = StructlogAdapter()
    if not isinstance(port, LoggingPort):
        raise TypeError(f"{type(port).__name__} does not implement LoggingPort")
    port.configure(config)
    return port
