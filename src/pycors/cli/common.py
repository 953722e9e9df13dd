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
"""Helpers shared by CLI commands."""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape

from pycors.core.config import Config
from pycors.cors.manager import CorsPolicyManager
from pycors.cors.options import AllowAll
from pycors.logging.structlog_adapter import StructlogAdapter

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML or TOML configuration file (packaged defaults when omitted).",
)


def load_manager(config_path: Path | None) -> CorsPolicyManager:
    """Load configuration, set up logging and build the profile manager."""
    config = Config.from_file(config_path) if config_path is not None else Config.defaults()
    StructlogAdapter().configure(config)
    return CorsPolicyManager(config)


def describe(value: AllowAll | frozenset[str] | tuple[str, ...]) -> str:
    if isinstance(value, AllowAll):
        return "*"
    if not value:
        return "[dim](none)[/dim]"
    items = sorted(value) if isinstance(value, frozenset) else value
    return escape(", ".join(items))
