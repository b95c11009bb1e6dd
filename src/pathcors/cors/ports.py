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
"""CorsPolicy port — the header logic applied for a matched rule.

Uses generic ``Any`` types for request/response so that vendor-specific
types stay confined to the adapter layer.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pathcors.cors.options import CorsOptions


@runtime_checkable
class CorsPolicy(Protocol):
    """Applies CORS response headers and recognises preflight requests."""

    def apply_headers(self, response: Any, request: Any, options: CorsOptions) -> None:
        """Write the CORS headers *options* call for onto *response*."""
        ...

    def is_preflight(self, request: Any) -> bool:
        """Return ``True`` if *request* is a CORS preflight request."""
        ...
