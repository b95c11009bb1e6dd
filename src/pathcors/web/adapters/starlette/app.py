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
"""pathcors web application factory built on Starlette."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.routing import BaseRoute

from pathcors.container.ordering import get_order
from pathcors.cors.loader import load_rules
from pathcors.logging.structlog_adapter import StructlogAdapter
from pathcors.web.adapters.starlette.filter_chain import WebFilterChainMiddleware
from pathcors.web.adapters.starlette.filters import CorsRulesFilter, RequestLoggingFilter
from pathcors.web.ports.filter import WebFilter

if TYPE_CHECKING:
    from pathcors.core.config import Config
    from pathcors.cors.options import CorsRule
    from pathcors.cors.ports import CorsPolicy


def create_app(
    rules: Sequence[CorsRule] | None = None,
    *,
    config: Config | None = None,
    routes: Sequence[BaseRoute] | None = None,
    policy: CorsPolicy | None = None,
    filters: Sequence[WebFilter] = (),
    debug: bool = False,
) -> Starlette:
    """Create a Starlette application guarded by path-scoped CORS rules.

    When *config* is given, logging is configured from ``pathcors.logging``
    first.  Rules come from *rules* when given, otherwise from
    ``pathcors.cors`` in *config*.  Loading happens here, before any request
    is served, so a malformed directive raises ``CorsSyntaxError`` instead of
    starting the app.

    The filter chain holds the request logging filter, the CORS rules filter
    and any caller-supplied *filters*, sorted by ``@order``.
    """
    if config is not None:
        StructlogAdapter().configure(config)
    if rules is None:
        rules = load_rules(config) if config is not None else []

    chain: list[WebFilter] = [
        RequestLoggingFilter(),
        CorsRulesFilter(rules, policy),
        *filters,
    ]
    chain.sort(key=lambda f: get_order(type(f)))

    return Starlette(
        debug=debug,
        routes=list(routes or []),
        middleware=[Middleware(WebFilterChainMiddleware, filters=chain)],
    )
