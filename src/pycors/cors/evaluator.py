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
"""Allow/deny decisions for actual requests.

Two evaluators share the same options: the base one only checks the origin
(headers are added best-effort and method errors are left to the
application), the strict one also enforces the method so a route can be
blocked before its handler runs.
"""

from __future__ import annotations

from dataclasses import dataclass

from pycors.cors.matchers import method_allowed, origin_allowed
from pycors.cors.options import PolicyOptions
from pycors.cors.request import CorsRequest


@dataclass(frozen=True)
class Rejection:
    """Status and plain-text body returned for a blocked actual request."""

    status_code: int
    content: str


ORIGIN_NOT_ALLOWED = Rejection(403, "Origin not allowed.")
METHOD_NOT_ALLOWED = Rejection(405, "Method not allowed.")
FORBIDDEN = Rejection(403, "Forbidden (cors).")


def is_actual_request_allowed(options: PolicyOptions, request: CorsRequest) -> bool:
    return origin_allowed(options, request)


def is_actual_request_allowed_strict(options: PolicyOptions, request: CorsRequest) -> bool:
    return origin_allowed(options, request) and method_allowed(options, request)


def not_allowed_response(options: PolicyOptions, request: CorsRequest) -> Rejection:
    """Pick the rejection matching the first failed check."""
    if not origin_allowed(options, request):
        return ORIGIN_NOT_ALLOWED
    if not method_allowed(options, request):
        return METHOD_NOT_ALLOWED
    return FORBIDDEN
