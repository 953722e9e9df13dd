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
"""CorsPolicy: the facade an integration layer holds for one profile."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, TypeVar

from starlette.datastructures import MutableHeaders

from pycors.cors import classifier, evaluator
from pycors.cors.actual import decorate_actual_response
from pycors.cors.options import PolicyOptions, normalize
from pycors.cors.preflight import (
    PreflightResponse,
    build_preflight_response,
    is_preflight_rejected,
    is_preflight_successful,
)
from pycors.cors.request import CorsRequest


class HasHeaders(Protocol):
    @property
    def headers(self) -> MutableHeaders: ...


R = TypeVar("R", bound=HasHeaders)


class CorsPolicy:
    """A normalized policy plus the evaluator flavour to apply it with.

    Args:
        options: Normalized options, or raw configuration to normalize.
        strict: When ``True`` (default) actual requests must also use an
            allowed method; when ``False`` only the origin is checked.
    """

    def __init__(self, options: PolicyOptions | Mapping[str, Any] | None = None, strict: bool = True) -> None:
        self.options = normalize(options)
        self.strict = strict

    @classmethod
    def from_config(cls, raw: Mapping[str, Any] | None, strict: bool = True) -> CorsPolicy:
        return cls(normalize(raw), strict=strict)

    def __repr__(self) -> str:
        return f"CorsPolicy(options={self.options!r}, strict={self.strict})"

    def is_cors_request(self, request: CorsRequest) -> bool:
        return classifier.is_cors_request(request)

    def is_preflight_request(self, request: CorsRequest) -> bool:
        return classifier.is_preflight_request(request)

    def is_actual_request_allowed(self, request: CorsRequest) -> bool:
        if self.strict:
            return evaluator.is_actual_request_allowed_strict(self.options, request)
        return evaluator.is_actual_request_allowed(self.options, request)

    def handle_preflight_request(self, request: CorsRequest) -> PreflightResponse:
        return build_preflight_response(self.options, request)

    def add_actual_request_headers(self, response: R, request: CorsRequest) -> R:
        """Decorate ``response.headers`` in place and return the response."""
        decorate_actual_response(self.options, request, response.headers)
        return response

    def create_not_allowed_response(self, request: CorsRequest) -> evaluator.Rejection:
        return evaluator.not_allowed_response(self.options, request)

    @staticmethod
    def is_preflight_successful(response: PreflightResponse) -> bool:
        return is_preflight_successful(response)

    @staticmethod
    def is_preflight_rejected(response: PreflightResponse) -> bool:
        return is_preflight_rejected(response)
