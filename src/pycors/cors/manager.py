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
"""Named CORS policy profiles read from configuration.

Configuration layout::

    pycors:
      cors:
        default: open
        strict: true
        profiles:
          open:
            allowedOrigins: ["*"]
            allowedMethods: ["*"]
            allowedHeaders: ["*"]
          api:
            allowedOrigins: ["https://app.example.com"]
            allowedOriginsPatterns: ["^https://[a-z0-9-]+\\.example\\.com$"]
            allowedMethods: [GET, POST]
            supportsCredentials: true
            maxAge: 3600
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import structlog

from pycors.core.config import Config, config_properties
from pycors.cors.policy import CorsPolicy
from pycors.kernel.exceptions import ProfileNotFoundException

logger = structlog.get_logger("pycors.cors")

PolicyCreator = Callable[[], CorsPolicy]


@config_properties(prefix="pycors.cors")
@dataclass
class CorsProperties:
    """Bound view of the ``pycors.cors`` configuration section."""

    default: str = "open"
    strict: bool = True
    profiles: dict[str, Any] = field(default_factory=dict)


class CorsPolicyManager:
    """Builds and caches one :class:`CorsPolicy` per profile name.

    A profile that is missing, or configured as an empty mapping, raises
    :class:`ProfileNotFoundException` when first requested.  That happens at
    setup time, so the application fails to start instead of serving
    requests under the wrong policy.
    """

    def __init__(self, config: Config | None = None) -> None:
        self._config = config if config is not None else Config.defaults()
        self._properties = self._config.bind(CorsProperties)
        self._profiles: dict[str, Any] = dict(self._properties.profiles or {})
        self._policies: dict[str, CorsPolicy] = {}
        self._creators: dict[str, PolicyCreator] = {}

    @property
    def properties(self) -> CorsProperties:
        return self._properties

    def default_profile(self) -> str:
        return self._properties.default

    def profiles(self) -> list[str]:
        """Configured profile names followed by custom-registered ones."""
        names = list(self._profiles)
        names.extend(name for name in self._creators if name not in names)
        return names

    def extend(self, name: str, creator: PolicyCreator) -> CorsPolicyManager:
        """Register a custom creator; it takes precedence over configuration."""
        self._creators[name] = creator
        self._policies.pop(name, None)
        return self

    def make(self, profile: str | None = None) -> CorsPolicy:
        """Return the policy for *profile* (the default profile when ``None``)."""
        name = profile or self.default_profile()
        policy = self._policies.get(name)
        if policy is None:
            policy = self._create(name)
            self._policies[name] = policy
        return policy

    def _create(self, name: str) -> CorsPolicy:
        creator = self._creators.get(name)
        if creator is not None:
            logger.debug("cors_profile_created", profile=name, source="custom")
            return creator()

        raw = self._profiles.get(name)
        if not raw:
            logger.warning("cors_profile_not_found", profile=name, available=self.profiles())
            raise ProfileNotFoundException(name)

        logger.debug("cors_profile_created", profile=name, source="config")
        return CorsPolicy.from_config(raw, strict=self._properties.strict)
