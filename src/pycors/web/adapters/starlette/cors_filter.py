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
"""CORS policy filter: applies one policy profile to the requests it matches.

Several filters may be stacked in one chain, e.g. a global profile first and
stricter per-route profiles after it.  The first CORS filter to produce or
decorate a response marks it handled; filters further out then leave it
alone.  Preflights never reach the route handler: a successful preflight is
answered at the end of the chain with the innermost filter's response.
An exception raised downstream of an actual request is logged and turned
into a decorated 500, so browsers see the error instead of a CORS failure.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from pycors.cors.manager import CorsPolicyManager
from pycors.cors.policy import CorsPolicy
from pycors.web.adapters.starlette.filter_chain import PREFLIGHT_RESPONSE_STATE
from pycors.web.adapters.starlette.request import (
    cors_request_from,
    is_handled,
    mark_handled,
    preflight_to_response,
    rejection_to_response,
)
from pycors.web.filters import OncePerRequestFilter
from pycors.web.ports.filter import CallNext

logger = structlog.get_logger("pycors.web")


class CorsPolicyFilter(OncePerRequestFilter):
    """Enforces a :class:`CorsPolicy` on matching requests.

    Args:
        policy: The policy itself, or a manager to resolve *profile* from.
            Defaults to a manager over the packaged defaults.
        profile: Profile name for manager lookup (default profile if ``None``).
            Resolved immediately, so a missing profile fails at setup.
        url_patterns: Glob patterns of paths this filter guards.
        exclude_patterns: Glob patterns of paths to leave alone.
    """

    def __init__(
        self,
        policy: CorsPolicy | CorsPolicyManager | None = None,
        profile: str | None = None,
        url_patterns: Iterable[str] | None = None,
        exclude_patterns: Iterable[str] | None = None,
    ) -> None:
        super().__init__(url_patterns, exclude_patterns)
        if policy is None:
            policy = CorsPolicyManager()
        if isinstance(policy, CorsPolicyManager):
            policy = policy.make(profile)
        self._policy = policy

    @property
    def policy(self) -> CorsPolicy:
        return self._policy

    async def do_filter(self, request: Request, call_next: CallNext) -> Response:
        cors_request = cors_request_from(request)
        policy = self._policy

        if not policy.is_cors_request(cors_request):
            return await call_next(request)

        if policy.is_preflight_request(cors_request):
            preflight = policy.handle_preflight_request(cors_request)
            preflight_response = mark_handled(preflight_to_response(preflight))

            if policy.is_preflight_rejected(preflight):
                logger.info(
                    "cors_preflight_rejected",
                    origin=cors_request.origin,
                    path=request.url.path,
                )
                return preflight_response

            setattr(request.state, PREFLIGHT_RESPONSE_STATE, preflight_response)
            response = await call_next(request)

            if 200 <= response.status_code < 300:
                return mark_handled(response)
            return preflight_response

        if not policy.is_actual_request_allowed(cors_request):
            rejection = policy.create_not_allowed_response(cors_request)
            logger.info(
                "cors_request_rejected",
                origin=cors_request.origin,
                method=cors_request.method,
                path=request.url.path,
                status_code=rejection.status_code,
            )
            return mark_handled(rejection_to_response(rejection))

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "cors_downstream_error",
                origin=cors_request.origin,
                method=cors_request.method,
                path=request.url.path,
            )
            response = PlainTextResponse("Internal Server Error", status_code=500)

        if is_handled(response):
            return response

        return mark_handled(policy.add_actual_request_headers(response, cors_request))
