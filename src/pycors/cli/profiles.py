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
"""'pycors profiles': list configured CORS profiles."""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape
from rich.table import Table

from pycors.cli.common import config_option, describe, load_manager
from pycors.cli.console import console
from pycors.kernel.exceptions import ConfigurationException


@click.command()
@config_option
def profiles_command(config_path: Path | None) -> None:
    """List CORS profiles and their normalized rules."""
    manager = load_manager(config_path)
    default = manager.default_profile()

    table = Table(title="CORS Profiles", border_style="dim")
    table.add_column("Profile", style="info")
    table.add_column("Origins")
    table.add_column("Methods")
    table.add_column("Headers")
    table.add_column("Credentials")
    table.add_column("Max-Age", justify="right")

    for name in manager.profiles():
        label = f"{name} [pycors](default)[/pycors]" if name == default else name
        try:
            options = manager.make(name).options
        except ConfigurationException:
            table.add_row(label, "[error]not configured[/error]", "", "", "", "")
            continue
        origins = describe(options.allowed_origins)
        if options.allowed_origin_patterns:
            patterns = escape(", ".join(p.pattern for p in options.allowed_origin_patterns))
            origins = f"{origins} [dim]+ /{patterns}/[/dim]"
        table.add_row(
            label,
            origins,
            describe(options.allowed_methods),
            describe(options.allowed_headers),
            "yes" if options.supports_credentials else "no",
            str(options.max_age) if options.max_age else "-",
        )

    console.print(table)
