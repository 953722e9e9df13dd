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
"""CORS policy engine: normalization, classification, matching and responses."""

from pycors.cors.actual import decorate_actual_response
from pycors.cors.classifier import (
    SIMPLE_METHODS,
    actual_method,
    is_cors_request,
    is_cross_origin,
    is_preflight_request,
    is_simple_method,
)
from pycors.cors.evaluator import (
    Rejection,
    is_actual_request_allowed,
    is_actual_request_allowed_strict,
    not_allowed_response,
)
from pycors.cors.manager import CorsPolicyManager, CorsProperties
from pycors.cors.matchers import headers_allowed, method_allowed, origin_allowed
from pycors.cors.options import ALLOW_ALL, AllowAll, PolicyOptions, normalize
from pycors.cors.policy import CorsPolicy
from pycors.cors.preflight import (
    PreflightResponse,
    build_preflight_response,
    is_preflight_rejected,
    is_preflight_successful,
)
from pycors.cors.request import CorsRequest

__all__ = [
    "ALLOW_ALL",
    "AllowAll",
    "CorsPolicy",
    "CorsPolicyManager",
    "CorsProperties",
    "CorsRequest",
    "PolicyOptions",
    "PreflightResponse",
    "Rejection",
    "SIMPLE_METHODS",
    "actual_method",
    "build_preflight_response",
    "decorate_actual_response",
    "headers_allowed",
    "is_actual_request_allowed",
    "is_actual_request_allowed_strict",
    "is_cors_request",
    "is_cross_origin",
    "is_preflight_rejected",
    "is_preflight_request",
    "is_preflight_successful",
    "is_simple_method",
    "method_allowed",
    "normalize",
    "not_allowed_response",
    "origin_allowed",
]
