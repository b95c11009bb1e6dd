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
"""Request path matching for CORS rules."""

from __future__ import annotations


def path_matches(rule_path: str, request_path: str) -> bool:
    """Return ``True`` when *request_path* falls under *rule_path*.

    Plain, case-sensitive string prefix: ``/api`` matches ``/api``,
    ``/api/widgets`` and also ``/apiary``.  Trailing slashes are significant,
    so ``/api/`` does not match ``/api``.
    """
    return request_path.startswith(rule_path)
