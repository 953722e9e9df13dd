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
"""Origin, method and header matching against :class:`PolicyOptions`."""

from __future__ import annotations

from pycors.cors.classifier import actual_method
from pycors.cors.options import PolicyOptions
from pycors.cors.request import REQUEST_HEADERS, CorsRequest


def origin_allowed(options: PolicyOptions, request: CorsRequest) -> bool:
    """Check the request Origin: wildcard, exact match, then patterns in order."""
    if options.allows_all_origins:
        return True

    origin = request.origin
    if origin is None:
        return False

    if origin in options.allowed_origins:  # type: ignore[operator]
        return True

    return any(pattern.search(origin) for pattern in options.allowed_origin_patterns)


def method_allowed(options: PolicyOptions, request: CorsRequest) -> bool:
    if options.allows_all_methods:
        return True
    return actual_method(request) in options.allowed_methods  # type: ignore[operator]


def headers_allowed(options: PolicyOptions, request: CorsRequest) -> bool:
    """Every header named in Access-Control-Request-Headers must be allowed."""
    if options.allows_all_headers or not request.has_header(REQUEST_HEADERS):
        return True

    requested = {h.strip() for h in request.header(REQUEST_HEADERS).lower().split(",")}
    requested.discard("")
    return not requested - options.allowed_header_set
