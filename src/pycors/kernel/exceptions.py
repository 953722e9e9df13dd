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
"""Exception hierarchy for pycors.

CORS rejections are ordinary verdicts, never exceptions. The only failures
raised by the library are configuration problems detected while a policy is
being selected, which should abort application setup.

Categories:
- ConfigurationException: invalid or incomplete CORS configuration
- ProfileNotFoundException: a named policy profile does not exist
"""

from __future__ import annotations


class PyCorsException(Exception):
    """Base exception for all pycors errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CORS_PROFILE_NOT_FOUND").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class ConfigurationException(PyCorsException):
    """CORS configuration cannot be turned into a policy."""


class ProfileNotFoundException(ConfigurationException):
    """The requested CORS policy profile is not configured."""

    def __init__(self, profile: str) -> None:
        super().__init__(
            f"CORS profile [{profile}] not found.",
            code="CORS_PROFILE_NOT_FOUND",
            context={"profile": profile},
        )
        self.profile = profile
