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
"""HeaderCorsPolicy — default CorsPolicy over Starlette requests and responses."""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import Response

from pathcors.cors.options import CorsOptions

ALLOW_ORIGIN = "Access-Control-Allow-Origin"
ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"
ALLOW_METHODS = "Access-Control-Allow-Methods"
ALLOW_HEADERS = "Access-Control-Allow-Headers"
EXPOSE_HEADERS = "Access-Control-Expose-Headers"
MAX_AGE = "Access-Control-Max-Age"
REQUEST_METHOD = "Access-Control-Request-Method"
REQUEST_HEADERS = "Access-Control-Request-Headers"


class HeaderCorsPolicy:
    """Writes CORS response headers for an allowed ``Origin``.

    A request whose origin is missing or not allowed gets no CORS headers
    at all; the browser then blocks the cross-origin response.
    """

    def is_preflight(self, request: Request) -> bool:
        return request.method == "OPTIONS" and REQUEST_METHOD in request.headers

    def apply_headers(self, response: Response, request: Request, options: CorsOptions) -> None:
        origin = request.headers.get("origin")
        if not origin or not options.allows_origin(origin):
            return

        headers = response.headers
        headers[ALLOW_ORIGIN] = origin
        headers.add_vary_header("Origin")
        if options.allow_credentials is not None:
            headers[ALLOW_CREDENTIALS] = "true" if options.allow_credentials else "false"

        if self.is_preflight(request):
            headers[ALLOW_METHODS] = options.allowed_methods
            # Empty allowed_headers echoes whatever the browser asked for.
            allowed_headers = options.allowed_headers or request.headers.get(REQUEST_HEADERS, "")
            if allowed_headers:
                headers[ALLOW_HEADERS] = allowed_headers
            if options.max_age > 0:
                headers[MAX_AGE] = str(options.max_age)
        elif options.exposed_headers:
            headers[EXPOSE_HEADERS] = options.exposed_headers
