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
"""CORS options and path-scoped rules."""

from __future__ import annotations

from dataclasses import dataclass, field

ANY_ORIGIN = "*"

DEFAULT_ALLOWED_METHODS = "POST, GET, OPTIONS, PUT, DELETE"
DEFAULT_ALLOWED_HEADERS = "Origin, Accept, Content-Type, Authorization"


@dataclass(frozen=True)
class CorsOptions:
    """Header values applied to requests matched by a :class:`CorsRule`.

    ``allowed_origins`` holds the ``"*"`` sentinel by default, meaning any
    origin is echoed back.  ``allow_credentials`` left at ``None`` means the
    credentials header is never sent, and a ``max_age`` of ``0`` omits the
    max-age header.
    """

    allowed_origins: tuple[str, ...] = (ANY_ORIGIN,)
    allowed_methods: str = DEFAULT_ALLOWED_METHODS
    allow_credentials: bool | None = None
    max_age: int = 0  # seconds
    allowed_headers: str = DEFAULT_ALLOWED_HEADERS
    exposed_headers: str = ""

    def allows_origin(self, origin: str) -> bool:
        return ANY_ORIGIN in self.allowed_origins or origin in self.allowed_origins


@dataclass(frozen=True)
class CorsRule:
    """CORS options scoped to a URL path prefix."""

    path: str = "/"
    options: CorsOptions = field(default_factory=CorsOptions)
