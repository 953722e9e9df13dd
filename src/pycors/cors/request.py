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
"""Read-only request view consumed by the CORS engine."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from starlette.datastructures import Headers

ORIGIN = "Origin"
REQUEST_METHOD = "Access-Control-Request-Method"
REQUEST_HEADERS = "Access-Control-Request-Headers"


@dataclass(frozen=True)
class CorsRequest:
    """The parts of an HTTP request that CORS decisions depend on.

    Attributes:
        method: HTTP method as sent by the client.
        headers: Case-insensitive request headers.
        scheme_and_host: Origin of the receiving server, e.g. ``https://api.example.com``.
    """

    method: str
    headers: Headers = field(default_factory=Headers)
    scheme_and_host: str = ""

    @classmethod
    def build(
        cls,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        host: str = "localhost",
        scheme: str = "http",
    ) -> CorsRequest:
        """Build a request view from plain values."""
        return cls(
            method=method.upper(),
            headers=Headers(headers=dict(headers or {})),
            scheme_and_host=f"{scheme}://{host}",
        )

    @property
    def origin(self) -> str | None:
        return self.headers.get(ORIGIN)

    def has_header(self, name: str) -> bool:
        return name in self.headers

    def header(self, name: str, default: str = "") -> str:
        return self.headers.get(name, default)
