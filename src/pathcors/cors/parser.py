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
"""Parser for ``cors`` directive blocks.

Grammar::

    cors [<origin-list>] [<path>] {
        origin <domain> [<domain> ...]
        methods <method-list>
        allow_credentials <true|false>
        max_age <seconds>
        allowed_headers <header-list>
        exposed_headers <header-list>
    }

With a single positional argument it is the path.  With two, the first is a
comma-separated origin list and the second the path; entries of the origin
list are stripped of surrounding whitespace and empty entries are dropped.
Parsing stops at the first error.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

import structlog

from pathcors.cors.options import CorsOptions, CorsRule
from pathcors.directives.dispenser import Dispenser

logger = structlog.get_logger("pathcors.cors")

DIRECTIVE = "cors"

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _as_str(d: Dispenser, item: str, value: str) -> str:
    return value


def _as_bool(d: Dispenser, item: str, value: str) -> bool:
    if value == "true":
        return True
    if value == "false":
        return False
    raise d.err(f"{item} must be true or false, got '{value}'")


def _as_int(d: Dispenser, item: str, value: str) -> int:
    if not _INT_RE.fullmatch(value):
        raise d.err(f"{item} must be a valid integer, got '{value}'")
    return int(value)


# sub-directive -> (CorsOptions field, converter)
_SINGLE_VALUE_ITEMS: dict[str, tuple[str, Callable[[Dispenser, str, str], Any]]] = {
    "methods": ("allowed_methods", _as_str),
    "allow_credentials": ("allow_credentials", _as_bool),
    "max_age": ("max_age", _as_int),
    "allowed_headers": ("allowed_headers", _as_str),
    "exposed_headers": ("exposed_headers", _as_str),
}


def parse_rules(d: Dispenser) -> list[CorsRule]:
    """Parse every ``cors`` block in *d* into rules, in input order.

    Raises:
        CorsSyntaxError: on the first malformed block.
    """
    rules: list[CorsRule] = []
    while d.next():
        if d.val != DIRECTIVE:
            raise d.err(f"unknown directive '{d.val}', expected '{DIRECTIVE}'")
        rules.append(_parse_rule(d))

    logger.info("cors_rules_parsed", count=len(rules), paths=[rule.path for rule in rules])
    return rules


def _parse_rule(d: Dispenser) -> CorsRule:
    path = "/"
    origins: list[str] = []
    origins_set = False

    args = d.remaining_args()
    if len(args) > 2:
        raise d.err("too many arguments")
    if len(args) == 2:
        origins = [o.strip() for o in args[0].split(",") if o.strip()]
        origins_set = True
        path = args[1]
    elif len(args) == 1:
        path = args[0]

    settings: dict[str, Any] = {}
    while d.next_block():
        item = d.val
        if item == "origin":
            origins = _parse_origin(d, origins, origins_set)
            origins_set = True
        elif item in _SINGLE_VALUE_ITEMS:
            name, convert = _SINGLE_VALUE_ITEMS[item]
            settings[name] = convert(d, item, _single_arg(d))
        else:
            raise d.err(f"unknown config item '{item}'")

    if origins_set:
        settings["allowed_origins"] = tuple(origins)
    return CorsRule(path=path, options=CorsOptions(**settings))


def _parse_origin(d: Dispenser, origins: list[str], origins_set: bool) -> list[str]:
    """Append the domains on this line; the first ``origin`` line replaces the default."""
    base = origins if origins_set else []
    return [*base, *d.remaining_args()]


def _single_arg(d: Dispenser) -> str:
    item = d.val
    args = d.remaining_args()
    if len(args) != 1:
        raise d.err(f"{item} expects exactly one argument")
    return args[0]
