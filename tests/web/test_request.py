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
"""Tests for the Starlette request conversion."""

from __future__ import annotations

import pytest
from starlette.requests import Request

from pycors.cors.classifier import is_cors_request
from pycors.web.adapters.starlette.request import cors_request_from


def _request(scheme: str, host: str, origin: str | None = None) -> Request:
    headers = [(b"host", host.encode())]
    if origin is not None:
        headers.append((b"origin", origin.encode()))
    return Request({
        "type": "http",
        "method": "GET",
        "scheme": scheme,
        "path": "/hello",
        "query_string": b"",
        "headers": headers,
        "server": ("example.com", 443),
    })


class TestSchemeAndHost:
    @pytest.mark.parametrize(
        ("scheme", "host", "expected"),
        [
            ("https", "example.com:443", "https://example.com"),
            ("http", "example.com:80", "http://example.com"),
            ("https", "example.com", "https://example.com"),
            ("https", "example.com:8443", "https://example.com:8443"),
            ("http", "example.com:443", "http://example.com:443"),
            ("https", "[::1]:443", "https://[::1]"),
        ],
    )
    def test_default_port_dropped(self, scheme, host, expected):
        assert cors_request_from(_request(scheme, host)).scheme_and_host == expected

    def test_explicit_default_port_is_same_origin(self):
        request = cors_request_from(_request("https", "example.com:443", origin="https://example.com"))

        assert not is_cors_request(request)

    def test_other_port_is_cross_origin(self):
        request = cors_request_from(_request("https", "example.com:8443", origin="https://example.com"))

        assert is_cors_request(request)
