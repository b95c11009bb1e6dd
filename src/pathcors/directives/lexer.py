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
"""Lexer for the directive file format.

Tokens are separated by whitespace.  A ``#`` at the start of a token begins a
comment that runs to the end of the line.  A token that starts with ``"``
extends to the next unescaped ``"`` and may span whitespace and newlines;
``\\"`` inside quotes is a literal quote.  ``{`` and ``}`` delimit blocks
when they stand alone as tokens.
"""

from __future__ import annotations

from dataclasses import dataclass

from pathcors.kernel.exceptions import CorsSyntaxError


@dataclass(frozen=True)
class Token:
    """A single lexical token and where it came from."""

    text: str
    line: int
    file: str = ""


def tokenize(text: str, filename: str = "") -> list[Token]:
    """Split directive *text* into tokens with 1-based line numbers."""
    tokens: list[Token] = []
    value: list[str] = []
    line = 1
    token_line = 1
    quoted = False
    escaped = False
    comment = False

    def flush() -> None:
        tokens.append(Token("".join(value), token_line, filename))
        value.clear()

    for ch in text:
        if quoted:
            if escaped:
                if ch != '"':
                    value.append("\\")
                value.append(ch)
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                quoted = False
                flush()
            else:
                value.append(ch)
            if ch == "\n":
                line += 1
            continue

        if ch == "\n":
            comment = False
            if value:
                flush()
            line += 1
            continue
        if comment:
            continue
        if ch.isspace():
            if value:
                flush()
            continue
        if not value:
            if ch == "#":
                comment = True
                continue
            token_line = line
            if ch == '"':
                quoted = True
                continue
        value.append(ch)

    if quoted:
        raise CorsSyntaxError("unterminated quoted string", token="".join(value), file=filename, line=token_line)
    if value:
        flush()
    return tokens
