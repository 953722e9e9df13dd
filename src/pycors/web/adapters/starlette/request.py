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
"""Starlette request/response conversions for the CORS engine."""

from __future__ import annotations

from typing import TypeVar

from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from pycors.cors.evaluator import Rejection
from pycors.cors.preflight import PreflightResponse
from pycors.cors.request import CorsRequest

_HANDLED_ATTR = "cors_handled"

ResponseT = TypeVar("ResponseT", bound=Response)

_DEFAULT_PORTS = {"http": 80, "https": 443}


def cors_request_from(request: Request) -> CorsRequest:
    """Build the engine's request view from a Starlette request.

    The default port of the scheme is dropped from the host, so
    ``Host: example.com:443`` over https is the same origin as
    ``https://example.com``.
    """
    url = request.url
    host = url.netloc
    if url.port is not None and url.port == _DEFAULT_PORTS.get(url.scheme):
        host = host.rsplit(":", 1)[0]
    return CorsRequest(
        method=request.method,
        headers=request.headers,
        scheme_and_host=f"{url.scheme}://{host}",
    )


def preflight_to_response(preflight: PreflightResponse) -> Response:
    response = Response(content=preflight.content, status_code=preflight.status_code)
    for name, value in preflight.headers.items():
        response.headers[name] = value
    return response


def rejection_to_response(rejection: Rejection) -> Response:
    return PlainTextResponse(rejection.content, status_code=rejection.status_code)


def mark_handled(response: ResponseT) -> ResponseT:
    """Flag a response as already processed by a CORS filter."""
    setattr(response, _HANDLED_ATTR, True)
    return response


def is_handled(response: Response) -> bool:
    return bool(getattr(response, _HANDLED_ATTR, False))
