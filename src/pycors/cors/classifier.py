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
"""Request classification: cross-origin, CORS, preflight, actual method."""

from __future__ import annotations

from typing import Final

from pycors.cors.request import ORIGIN, REQUEST_METHOD, CorsRequest

SIMPLE_METHODS: Final = frozenset({"GET", "HEAD", "POST"})


def is_cross_origin(request: CorsRequest) -> bool:
    """True when an Origin is sent and differs from the server's own origin."""
    origin = request.origin
    return origin is not None and origin != request.scheme_and_host


def is_cors_request(request: CorsRequest) -> bool:
    return request.has_header(ORIGIN) and is_cross_origin(request)


def is_preflight_request(request: CorsRequest) -> bool:
    return (
        is_cors_request(request)
        and request.method.upper() == "OPTIONS"
        and request.has_header(REQUEST_METHOD)
    )


def actual_method(request: CorsRequest) -> str:
    """Method of the real request, even while answering its preflight."""
    if is_preflight_request(request):
        return request.header(REQUEST_METHOD).upper()
    return request.method


def is_simple_method(request: CorsRequest) -> bool:
    """Browsers send GET, HEAD and POST without checking Allow-Methods."""
    return actual_method(request) in SIMPLE_METHODS
