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
"""Request logging filter — logs method, path, status, and duration."""

from __future__ import annotations

import time
from typing import cast

import structlog
from starlette.requests import Request
from starlette.responses import Response

from pathcors.container.ordering import HIGHEST_PRECEDENCE, order
from pathcors.web.ports.filter import CallNext

logger = structlog.get_logger("pathcors.web")


@order(HIGHEST_PRECEDENCE + 10)
class RequestLoggingFilter:
    """Logs each request, including preflights answered by the CORS filter."""

    def should_not_filter(self, request: Request) -> bool:
        return False

    async def do_filter(self, request: Request, call_next: CallNext) -> Response:
        start = time.perf_counter()
        try:
            response = cast(Response, await call_next(request))
        except Exception as exc:
            logger.error(
                "http_request_failed",
                method=request.method,
                path=request.url.path,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise

        logger.info(
            "http_request",
            method=request.method,
            path=request.url.path,
            origin=request.headers.get("origin"),
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return response
