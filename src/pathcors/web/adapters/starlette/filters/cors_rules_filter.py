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
"""CORS rules filter — applies the first path-matching CORS rule to each request."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, cast

import structlog
from starlette.requests import Request
from starlette.responses import Response

from pathcors.container.ordering import HIGHEST_PRECEDENCE, order
from pathcors.cors.matching import path_matches
from pathcors.cors.options import CorsRule
from pathcors.cors.parser import parse_rules
from pathcors.cors.ports import CorsPolicy
from pathcors.directives.dispenser import Dispenser
from pathcors.web.adapters.starlette.cors_policy import HeaderCorsPolicy
from pathcors.web.ports.filter import CallNext

logger = structlog.get_logger("pathcors.web")


def cors_handler(rules: Sequence[CorsRule], policy: CorsPolicy) -> Callable[[CallNext], CallNext]:
    """Build the hook that wraps a next handler with CORS rule dispatch.

    Only the first rule whose path matches is applied, even when its origin
    list rejects the request; later rules are never consulted.  A matched
    preflight request is answered with an empty ``200`` and the next handler
    is not called.
    """
    ordered = tuple(rules)

    def middleware(next_handler: CallNext) -> CallNext:
        async def handler(request: Request) -> Response:
            path = request.url.path
            for rule in ordered:
                if not path_matches(rule.path, path):
                    continue
                preflight = policy.is_preflight(request)
                logger.debug("cors_rule_matched", path=path, rule_path=rule.path, preflight=preflight)
                if preflight:
                    response = Response(status_code=200)
                    policy.apply_headers(response, request, rule.options)
                    return response
                response = cast(Response, await next_handler(request))
                policy.apply_headers(response, request, rule.options)
                return response
            return cast(Response, await next_handler(request))

        return handler

    return middleware


@order(HIGHEST_PRECEDENCE + 100)
class CorsRulesFilter:
    """WebFilter that runs :func:`cors_handler` inside the filter chain."""

    def __init__(self, rules: Sequence[CorsRule], policy: CorsPolicy | None = None) -> None:
        self.rules: tuple[CorsRule, ...] = tuple(rules)
        self.policy: CorsPolicy = policy if policy is not None else HeaderCorsPolicy()
        self._middleware = cors_handler(self.rules, self.policy)

    def should_not_filter(self, request: Any) -> bool:
        return not self.rules

    async def do_filter(self, request: Request, call_next: CallNext) -> Response:
        return await self._middleware(call_next)(request)


def setup(dispenser: Dispenser, policy: CorsPolicy | None = None) -> CorsRulesFilter:
    """Parse the ``cors`` blocks in *dispenser* and build the filter.

    Raises:
        CorsSyntaxError: if any block is malformed.
    """
    return CorsRulesFilter(parse_rules(dispenser), policy)
