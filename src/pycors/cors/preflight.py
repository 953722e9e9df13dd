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
"""Preflight response construction.

This deliberately departs from the W3C preflight algorithm, which adds no
CORS headers at all as soon as the origin, the method or any header is
rejected.  A browser would then report an origin error for what is really an
unsupported header.  Here headers are only withheld when the origin itself is
not allowed, so nothing about the policy leaks to unknown origins.  Once the
origin is accepted, every header is sent and the browser produces the
precise error.

The exception is a disallowed *simple* method (GET, HEAD, POST): browsers do
not check those against Access-Control-Allow-Methods, so the only way to make
the browser reject them is to drop Access-Control-Allow-Origin.

See https://www.w3.org/TR/cors/#resource-preflight-requests
"""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog
from starlette.datastructures import MutableHeaders

from pycors.cors.classifier import actual_method, is_simple_method
from pycors.cors.headers import (
    ALLOW_CREDENTIALS,
    ALLOW_HEADERS,
    ALLOW_METHODS,
    ALLOW_ORIGIN,
    MAX_AGE,
    vary_origin,
)
from pycors.cors.matchers import headers_allowed, method_allowed, origin_allowed
from pycors.cors.options import PolicyOptions
from pycors.cors.request import REQUEST_HEADERS, REQUEST_METHOD, CorsRequest

logger = structlog.get_logger("pycors.cors")


@dataclass
class PreflightResponse:
    """Response to a preflight request.

    Always ``204 No Content``, even when rejected.  ``successful`` tells the
    integration layer whether the real request may proceed; it is never sent
    to the client.
    """

    headers: MutableHeaders = field(default_factory=MutableHeaders)
    successful: bool = False
    status_code: int = 204
    content: bytes = b""


def build_preflight_response(options: PolicyOptions, request: CorsRequest) -> PreflightResponse:
    response = PreflightResponse()
    headers = response.headers

    vary_origin(headers)

    if not origin_allowed(options, request):
        logger.debug("cors_preflight_rejected", origin=request.origin, reason="origin")
        return response

    headers[ALLOW_ORIGIN] = request.header("Origin")

    method_ok = method_allowed(options, request)
    if not method_ok and is_simple_method(request):
        del headers[ALLOW_ORIGIN]

    if options.allows_all_methods:
        headers[ALLOW_METHODS] = request.header(REQUEST_METHOD).upper()
    else:
        headers[ALLOW_METHODS] = ", ".join(options.allowed_methods)  # type: ignore[arg-type]

    if options.allows_all_headers:
        headers[ALLOW_HEADERS] = request.header(REQUEST_HEADERS).upper()
    else:
        headers[ALLOW_HEADERS] = ", ".join(options.allowed_headers)  # type: ignore[arg-type]

    if options.supports_credentials:
        headers[ALLOW_CREDENTIALS] = "true"

    if options.max_age > 0:
        headers[MAX_AGE] = str(options.max_age)

    response.successful = method_ok and headers_allowed(options, request)
    logger.debug(
        "cors_preflight_handled",
        origin=request.origin,
        method=actual_method(request),
        successful=response.successful,
    )
    return response


def is_preflight_successful(response: PreflightResponse) -> bool:
    return response.successful


def is_preflight_rejected(response: PreflightResponse) -> bool:
    return not response.successful
