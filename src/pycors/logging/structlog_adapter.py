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
"""StructlogAdapter: structlog output for the ``pycors`` logger tree.

The engine logs its decisions on ``pycors.cors`` and the Starlette filter
logs on ``pycors.web``.  Configuration::

    pycors:
      logging:
        format: console        # or json
        level:
          root: INFO           # every pycors logger
          cors: DEBUG          # per-area overrides
          web: WARNING

Only the ``pycors`` logger gets a handler, so the host application's own
logging setup is left alone.  Configuring again replaces the handler.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

from pycors.core.config import Config

AREAS = ("cors", "web")
PACKAGE_LOGGER = "pycors"

_HANDLER_NAME = "pycors-structlog"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


class StructlogAdapter:
    """Routes pycors' structlog events through one stdlib handler.

    Args:
        stream: Where rendered events go (``sys.stderr`` when ``None``).
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._root_level: str = "INFO"
        self._format: str = "console"
        self._area_levels: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        """Configure structlog and the pycors loggers from ``pycors.logging``."""
        self._root_level = str(config.get("pycors.logging.level.root", "INFO")).upper()
        self._area_levels = {}
        for area in AREAS:
            level = config.get(f"pycors.logging.level.{area}")
            if level is not None:
                self._area_levels[area] = str(level).upper()
        self._format = str(config.get("pycors.logging.format", "console")).lower()

        self._setup_structlog()
        self._install_handler()
        for area in AREAS:
            self.set_level(area, self._area_levels.get(area))

    def set_level(self, area: str, level: str | None) -> None:
        """Set the level of ``pycors.<area>``; ``None`` inherits the root level."""
        logger = logging.getLogger(f"{PACKAGE_LOGGER}.{area}")
        logger.setLevel(logging.NOTSET if level is None else _level(level))

    def _setup_structlog(self) -> None:
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )

    def _install_handler(self) -> None:
        stream = self._stream if self._stream is not None else sys.stderr

        renderers: list[structlog.types.Processor]
        if self._format == "json":
            renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
        else:
            renderers = [structlog.dev.ConsoleRenderer(colors=stream.isatty())]

        handler = logging.StreamHandler(stream)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderers],
            )
        )

        package = logging.getLogger(PACKAGE_LOGGER)
        for existing in list(package.handlers):
            if existing.get_name() == _HANDLER_NAME:
                package.removeHandler(existing)
        package.addHandler(handler)
        package.setLevel(_level(self._root_level))
        package.propagate = False
