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
"""Normalized, immutable CORS policy options.

A raw policy (as written in configuration) is turned into a
:class:`PolicyOptions` exactly once by :func:`normalize`.  Any list holding
the ``"*"`` wildcard collapses to the :data:`ALLOW_ALL` marker, after which
the individual entries are gone for good.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Final

WILDCARD: Final = "*"

# PHP-style regex delimiters accepted for origin patterns: /.../flags
_DELIMITED_RE = re.compile(r"^([/#~])(?P<body>.*)\1(?P<flags>[imsx]*)$", re.DOTALL)

_FLAG_MAP = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL, "x": re.VERBOSE}

# Accepted spellings for each option, camelCase (as the packaged profiles
# use) first, then snake_case.
_KEYS: Final[dict[str, tuple[str, ...]]] = {
    "allowed_origins": ("allowedOrigins", "allowed_origins"),
    "allowed_origin_patterns": (
        "allowedOriginsPatterns",
        "allowedOriginPatterns",
        "allowed_origins_patterns",
        "allowed_origin_patterns",
    ),
    "allowed_methods": ("allowedMethods", "allowed_methods"),
    "allowed_headers": ("allowedHeaders", "allowed_headers"),
    "exposed_headers": ("exposedHeaders", "exposed_headers"),
    "supports_credentials": ("supportsCredentials", "supports_credentials"),
    "max_age": ("maxAge", "max_age"),
}


class AllowAll:
    """Marker for an option that matches everything."""

    _instance: AllowAll | None = None

    def __new__(cls) -> AllowAll:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ALLOW_ALL"

    def __reduce__(self) -> str:
        return "ALLOW_ALL"


ALLOW_ALL: Final = AllowAll()


@dataclass(frozen=True)
class PolicyOptions:
    """A normalized CORS policy.

    Methods and headers keep their configuration order so they can be echoed
    back in preflight responses exactly as configured.
    """

    allowed_origins: AllowAll | frozenset[str] = frozenset()
    allowed_origin_patterns: tuple[re.Pattern[str], ...] = ()
    allowed_methods: AllowAll | tuple[str, ...] = ()
    allowed_headers: AllowAll | tuple[str, ...] = ()
    exposed_headers: tuple[str, ...] = ()
    supports_credentials: bool = False
    max_age: int = 0

    @property
    def allows_all_origins(self) -> bool:
        return self.allowed_origins is ALLOW_ALL

    @property
    def allows_all_methods(self) -> bool:
        return self.allowed_methods is ALLOW_ALL

    @property
    def allows_all_headers(self) -> bool:
        return self.allowed_headers is ALLOW_ALL

    @property
    def allowed_header_set(self) -> frozenset[str]:
        """Explicit allowed headers as a set (empty when all are allowed)."""
        if isinstance(self.allowed_headers, AllowAll):
            return frozenset()
        return frozenset(self.allowed_headers)


def normalize(raw: Mapping[str, Any] | PolicyOptions | None = None) -> PolicyOptions:
    """Turn raw policy configuration into :class:`PolicyOptions`.

    Missing keys fall back to "nothing allowed".  Entries are assumed to be
    strings already; malformed input is not validated here.

    Normalizing a :class:`PolicyOptions` returns it unchanged.
    """
    if isinstance(raw, PolicyOptions):
        return raw

    raw = raw or {}

    origins = _list(raw, "allowed_origins")
    methods = _list(raw, "allowed_methods")
    headers = _list(raw, "allowed_headers")

    return PolicyOptions(
        allowed_origins=ALLOW_ALL if WILDCARD in origins else frozenset(origins),
        allowed_origin_patterns=tuple(_compile(p) for p in _list(raw, "allowed_origin_patterns")),
        allowed_methods=ALLOW_ALL if WILDCARD in methods else tuple(m.upper() for m in methods),
        allowed_headers=ALLOW_ALL if WILDCARD in headers else tuple(h.lower() for h in headers),
        exposed_headers=tuple(_list(raw, "exposed_headers")),
        supports_credentials=bool(_option(raw, "supports_credentials", False)),
        max_age=max(0, int(_option(raw, "max_age", 0) or 0)),
    )


def _option(raw: Mapping[str, Any], name: str, default: Any) -> Any:
    for key in _KEYS[name]:
        if key in raw:
            return raw[key]
    return default


def _list(raw: Mapping[str, Any], name: str) -> list[Any]:
    value = _option(raw, name, None)
    if value is None:
        return []
    if isinstance(value, (str, re.Pattern)):
        return [value]
    return list(value) if isinstance(value, Iterable) else [value]


def _compile(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    """Compile an origin pattern (Python ``re`` syntax, PHP delimiters tolerated)."""
    if isinstance(pattern, re.Pattern):
        return pattern
    match = _DELIMITED_RE.match(pattern)
    if match is None:
        return re.compile(pattern)
    flags = 0
    for flag in match.group("flags"):
        flags |= _FLAG_MAP[flag]
    return re.compile(match.group("body"), flags)
