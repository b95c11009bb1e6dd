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
"""Dispenser — cursor over directive tokens used by directive parsers."""

from __future__ import annotations

from collections.abc import Sequence

from pathcors.directives.lexer import Token, tokenize
from pathcors.kernel.exceptions import CorsSyntaxError


class Dispenser:
    """Hands out tokens one at a time with line and block awareness.

    The cursor starts *before* the first token; call :meth:`next` to load
    it.  A directive parser typically loops::

        while d.next():             # directive name
            args = d.remaining_args()
            while d.next_block():   # one sub-directive per iteration
                ...
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = list(tokens)
        self._cursor = -1
        self._nesting = 0

    @classmethod
    def from_text(cls, text: str, filename: str = "") -> Dispenser:
        return cls(tokenize(text, filename))

    def next(self) -> bool:
        """Load the next token; return ``False`` when tokens are exhausted."""
        if self._cursor < len(self._tokens) - 1:
            self._cursor += 1
            return True
        return False

    def next_arg(self) -> bool:
        """Load the next token only if it is an argument on the current line."""
        if self._cursor < 0:
            return False
        following = self._cursor + 1
        if following >= len(self._tokens):
            return False
        token = self._tokens[following]
        if token.line != self._end_line or token.file != self._current.file or token.text == "{":
            return False
        self._cursor = following
        return True

    def remaining_args(self) -> list[str]:
        """Consume and return all arguments left on the current line."""
        args: list[str] = []
        while self.next_arg():
            args.append(self.val)
        return args

    def next_block(self) -> bool:
        """Advance to the next line inside a ``{ ... }`` block.

        Returns ``False`` when there is no block, or once its closing brace
        has been consumed.
        """
        if self._nesting > 0:
            if not self.next():
                raise self.err("unexpected end of input, expected '}'")
            if self.val == "}":
                self._nesting -= 1
                return False
            return True

        following = self._cursor + 1
        if following >= len(self._tokens) or self._tokens[following].text != "{":
            return False
        if self._cursor >= 0 and self._tokens[following].line != self._end_line:
            return False
        self._cursor = following
        if not self.next():
            raise self.err("unexpected end of input, expected '}'")
        if self.val == "}":
            return False
        self._nesting += 1
        return True

    @property
    def _current(self) -> Token:
        return self._tokens[self._cursor]

    @property
    def _end_line(self) -> int:
        # quoted tokens may span lines; arguments continue on the closing line
        return self._current.line + self._current.text.count("\n")

    @property
    def val(self) -> str:
        """Text of the current token, or ``""`` before the first token."""
        if 0 <= self._cursor < len(self._tokens):
            return self._current.text
        return ""

    @property
    def line(self) -> int:
        if 0 <= self._cursor < len(self._tokens):
            return self._current.line
        return 0

    @property
    def file(self) -> str:
        if 0 <= self._cursor < len(self._tokens):
            return self._current.file
        return ""

    def err(self, message: str) -> CorsSyntaxError:
        """Build a syntax error located at the current token."""
        return CorsSyntaxError(message, token=self.val, file=self.file, line=self.line)
