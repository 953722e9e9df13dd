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
"""'pycors check': evaluate a request against a profile and show the headers."""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape
from rich.table import Table
from starlette.datastructures import MutableHeaders

from pycors.cli.common import config_option, load_manager
from pycors.cli.console import console
from pycors.cors.actual import decorate_actual_response
from pycors.cors.request import REQUEST_HEADERS, REQUEST_METHOD, CorsRequest
from pycors.kernel.exceptions import ConfigurationException


@click.command()
@click.option("--origin", required=True, help="Value of the Origin header.")
@click.option("--method", default="GET", show_default=True, help="Method of the actual request.")
@click.option("--host", default="localhost", show_default=True, help="Host receiving the request.")
@click.option("--scheme", default="http", show_default=True, help="Scheme of the receiving server.")
@click.option("--request-headers", default=None, help="Comma-separated headers the request will send.")
@click.option("--preflight/--actual", default=True, show_default=True, help="Simulate a preflight or the actual request.")
@click.option("--profile", default=None, help="Profile name (default profile when omitted).")
@config_option
def check_command(
    origin: str,
    method: str,
    host: str,
    scheme: str,
    request_headers: str | None,
    preflight: bool,
    profile: str | None,
    config_path: Path | None,
) -> None:
    """Show what a CORS profile answers to a request.

    Exits with status 1 when the request would be rejected.
    """
    try:
        policy = load_manager(config_path).make(profile)
    except ConfigurationException as exc:
        console.print(f"[error]Error:[/error] {escape(str(exc))}")
        raise SystemExit(2) from exc

    headers = {"Origin": origin}
    if preflight:
        headers[REQUEST_METHOD] = method
        if request_headers:
            headers[REQUEST_HEADERS] = request_headers
    request = CorsRequest.build(
        method="OPTIONS" if preflight else method,
        headers=headers,
        host=host,
        scheme=scheme,
    )

    if not policy.is_cors_request(request):
        console.print("[info]Not a CORS request:[/info] origin matches the server.")
        return

    if preflight:
        response = policy.handle_preflight_request(request)
        allowed = response.successful
        status = response.status_code
        response_headers = dict(response.headers.items())
    else:
        allowed = policy.is_actual_request_allowed(request)
        if allowed:
            status = 200
            response_headers = dict(decorate_actual_response(policy.options, request, MutableHeaders()).items())
        else:
            rejection = policy.create_not_allowed_response(request)
            status = rejection.status_code
            response_headers = {}

    kind = "Preflight" if preflight else "Request"
    verdict = "[success]allowed[/success]" if allowed else "[error]rejected[/error]"
    console.print(f"{kind} {method.upper()} from [info]{escape(origin)}[/info]: {verdict} (status {status})")

    table = Table(title="Response Headers", border_style="dim")
    table.add_column("Header", style="info")
    table.add_column("Value")
    for name, value in response_headers.items():
        table.add_row(name, escape(value))
    console.print(table)

    if not allowed:
        raise SystemExit(1)

