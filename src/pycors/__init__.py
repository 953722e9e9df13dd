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
"""pycors: CORS policy engine with a Starlette integration.

Typical use::

    from starlette.applications import Starlette
    from starlette.middleware import Middleware

    from pycors import Config, CorsPolicyFilter, CorsPolicyManager, WebFilterChainMiddleware

    manager = CorsPolicyManager(Config.from_file("pycors.yaml"))
    app = Starlette(
        routes=routes,
        middleware=[
            Middleware(
                WebFilterChainMiddleware,
                filters=[
                    CorsPolicyFilter(manager),
                    CorsPolicyFilter(manager, profile="api", url_patterns=["/api/*"]),
                ],
            )
        ],
    )
"""

__version__ = "0.1.0"

from pycors.core.config import Config
from pycors.cors import (
    ALLOW_ALL,
    CorsPolicy,
    CorsPolicyManager,
    CorsRequest,
    PolicyOptions,
    PreflightResponse,
    normalize,
)
from pycors.kernel.exceptions import ConfigurationException, ProfileNotFoundException, PyCorsException
from pycors.web import CorsPolicyFilter, WebFilterChainMiddleware

__all__ = [
    "ALLOW_ALL",
    "Config",
    "ConfigurationException",
    "CorsPolicy",
    "CorsPolicyFilter",
    "CorsPolicyManager",
    "CorsRequest",
    "PolicyOptions",
    "PreflightResponse",
    "ProfileNotFoundException",
    "PyCorsException",
    "WebFilterChainMiddleware",
    "__version__",
    "normalize",
]
