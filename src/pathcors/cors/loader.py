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
"""Load CORS rules from application configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pathcors.core.config import Config, config_properties
from pathcors.cors.options import CorsRule
from pathcors.cors.parser import parse_rules
from pathcors.directives.dispenser import Dispenser
from pathcors.directives.lexer import Token, tokenize
from pathcors.kernel.exceptions import ConfigurationException


@config_properties(prefix="pathcors.cors")
@dataclass
class CorsProperties:
    """Where the ``cors`` directive blocks come from.

    ``file`` is read first, then ``directives``; both feed one rule list.
    A relative ``file`` is resolved against the configuration's base directory.
    """

    file: str = ""
    directives: str = ""


def load_rules(config: Config) -> list[CorsRule]:
    """Tokenize and parse the configured directive sources into rules."""
    props = config.bind(CorsProperties)
    tokens: list[Token] = []

    if props.file:
        path = Path(props.file)
        if not path.is_absolute():
            path = config.base_dir / path
        try:
            text = path.read_text()
        except OSError as exc:
            raise ConfigurationException(
                f"Cannot read CORS directive file: {path}",
                code="CONFIG_NOT_FOUND",
                context={"path": str(path)},
            ) from exc
        tokens.extend(tokenize(text, str(path)))

    if props.directives:
        tokens.extend(tokenize(props.directives, "pathcors.cors.directives"))

    return parse_rules(Dispenser(tokens))
