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
"""Tests for the preflight response algorithm."""

from __future__ import annotations

import dataclasses

from pycors.cors.options import normalize
from pycors.cors.preflight import (
    PreflightResponse,
    build_preflight_response,
    is_preflight_rejected,
    is_preflight_successful,
)
from pycors.cors.request import CorsRequest


def _preflight(method="GET", request_headers="X-CUSTOM-1, X-CUSTOM-2") -> CorsRequest:
    headers = {"Origin": "http://bar.com", "Access-Control-Request-Method": method}
    if request_headers is not None:
        headers["Access-Control-Request-Headers"] = request_headers
    return CorsRequest.build(method="OPTIONS", headers=headers, host="foo.com")


def _assert_empty_204(response: PreflightResponse) -> None:
    assert response.status_code == 204
    assert response.content == b""


class TestOriginNotAllowed:
    def test_only_vary_is_set(self):
        response = build_preflight_response(normalize({}), _preflight())

        _assert_empty_204(response)
        assert list(response.headers.keys()) == ["vary"]
        assert response.headers["Vary"] == "Origin"
        assert not is_preflight_successful(response)
        assert is_preflight_rejected(response)


class TestSimpleMethodNotAllowed:
    def test_allow_origin_withheld(self):
        response = build_preflight_response(normalize({"allowedOrigins": ["*"]}), _preflight("GET"))

        _assert_empty_204(response)
        assert list(response.headers.keys()) == [
            "vary",
            "access-control-allow-methods",
            "access-control-allow-headers",
        ]
        assert "Access-Control-Allow-Origin" not in response.headers
        assert response.headers["Access-Control-Allow-Methods"] == ""
        assert response.headers["Access-Control-Allow-Headers"] == ""
        assert is_preflight_rejected(response)


class TestNonSimpleMethodNotAllowed:
    def test_allow_origin_kept_and_methods_listed(self):
        options = normalize({"allowedOrigins": ["*"], "allowedMethods": ["GET", "POST"]})
        response = build_preflight_response(options, _preflight("DELETE"))

        _assert_empty_204(response)
        assert list(response.headers.keys()) == [
            "vary",
            "access-control-allow-origin",
            "access-control-allow-methods",
            "access-control-allow-headers",
        ]
        assert response.headers["Access-Control-Allow-Origin"] == "http://bar.com"
        assert response.headers["Access-Control-Allow-Methods"] == "GET, POST"
        assert response.headers["Access-Control-Allow-Headers"] == ""
        assert is_preflight_rejected(response)


class TestHeaderNotAllowed:
    def test_diagnostic_headers_sent(self):
        options = normalize({"allowedOrigins": ["*"], "allowedMethods": ["*"]})
        response = build_preflight_response(options, _preflight("DELETE"))

        assert response.headers["Access-Control-Allow-Origin"] == "http://bar.com"
        assert response.headers["Access-Control-Allow-Methods"] == "DELETE"
        assert response.headers["Access-Control-Allow-Headers"] == ""
        assert is_preflight_rejected(response)

    def test_explicit_headers_listed_in_configuration_order(self):
        options = normalize({
            "allowedOrigins": ["*"],
            "allowedMethods": ["*"],
            "allowedHeaders": ["X-Custom-2", "Content-Type"],
        })
        response = build_preflight_response(options, _preflight("PUT"))

        assert response.headers["Access-Control-Allow-Headers"] == "x-custom-2, content-type"
        assert is_preflight_rejected(response)


class TestSuccessfulPreflight:
    def test_all_headers_present(self):
        options = normalize({
            "allowedOrigins": ["*"],
            "supportsCredentials": True,
            "allowedHeaders": ["*"],
            "allowedMethods": ["*"],
            "maxAge": 3600,
        })
        response = build_preflight_response(options, _preflight("delete"))

        _assert_empty_204(response)
        assert list(response.headers.keys()) == [
            "vary",
            "access-control-allow-origin",
            "access-control-allow-methods",
            "access-control-allow-headers",
            "access-control-allow-credentials",
            "access-control-max-age",
        ]
        assert response.headers["Vary"] == "Origin"
        assert response.headers["Access-Control-Allow-Origin"] == "http://bar.com"
        assert response.headers["Access-Control-Allow-Methods"] == "DELETE"
        assert response.headers["Access-Control-Allow-Headers"] == "X-CUSTOM-1, X-CUSTOM-2"
        assert response.headers["Access-Control-Allow-Credentials"] == "true"
        assert response.headers["Access-Control-Max-Age"] == "3600"
        assert is_preflight_successful(response)
        assert not is_preflight_rejected(response)

    def test_success_marker_is_not_a_header(self):
        options = normalize({"allowedOrigins": ["*"], "allowedMethods": ["*"], "allowedHeaders": ["*"]})
        response = build_preflight_response(options, _preflight("PUT"))

        assert response.successful
        assert all(not name.startswith("x-") for name in response.headers.keys())

    def test_explicit_lists(self):
        options = normalize({
            "allowedOrigins": ["http://bar.com"],
            "allowedMethods": ["put", "patch"],
            "allowedHeaders": ["X-Custom-1", "X-Custom-2"],
        })
        response = build_preflight_response(options, _preflight("PATCH"))

        assert response.headers["Access-Control-Allow-Methods"] == "PUT, PATCH"
        assert response.headers["Access-Control-Allow-Headers"] == "x-custom-1, x-custom-2"
        assert "Access-Control-Allow-Credentials" not in response.headers
        assert "Access-Control-Max-Age" not in response.headers
        assert is_preflight_successful(response)

    def test_wildcard_headers_without_request_headers(self):
        options = normalize({"allowedOrigins": ["*"], "allowedMethods": ["*"], "allowedHeaders": ["*"]})
        response = build_preflight_response(options, _preflight("PUT", request_headers=None))

        assert response.headers["Access-Control-Allow-Headers"] == ""
        assert is_preflight_successful(response)

    def test_pattern_origin(self):
        options = normalize({
            "allowedOriginsPatterns": [r"^http://(.+\.)?bar\.com$"],
            "allowedMethods": ["GET"],
            "allowedHeaders": ["*"],
        })
        response = build_preflight_response(options, _preflight("GET"))

        assert response.headers["Access-Control-Allow-Origin"] == "http://bar.com"
        assert is_preflight_successful(response)

    def test_non_positive_max_age_is_not_sent(self):
        options = dataclasses.replace(
            normalize({"allowedOrigins": ["*"], "allowedMethods": ["*"], "allowedHeaders": ["*"]}),
            max_age=-5,
        )
        response = build_preflight_response(options, _preflight("PUT"))

        assert "Access-Control-Max-Age" not in response.headers
        assert is_preflight_successful(response)
