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
"""Decoration of responses to actual (non-preflight) CORS requests."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import TypeVar

from pycors.cors.headers import ALLOW_CREDENTIALS, ALLOW_ORIGIN, EXPOSE_HEADERS, vary_origin
from pycors.cors.matchers import origin_allowed
from pycors.cors.options import PolicyOptions
from pycors.cors.request import CorsRequest

H = TypeVar("H", bound=MutableMapping[str, str])


def decorate_actual_response(options: PolicyOptions, request: CorsRequest, headers: H) -> H:
    """Add CORS headers for an allowed origin; leave *headers* untouched otherwise.

    The method is not checked here.  A wrong method on a real request is an
    ordinary 405 for the application to produce, not a CORS concern.
    """
    if not origin_allowed(options, request):
        return headers

    vary_origin(headers)
    headers[ALLOW_ORIGIN] = request.header("Origin")

    if options.supports_credentials:
        headers[ALLOW_CREDENTIALS] = "true"

    if options.exposed_headers:
        headers[EXPOSE_HEADERS] = ", ".join(options.exposed_headers)

    return headers
