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
"""Tests for the directive lexer."""

import pytest

from pathcors.directives.lexer import Token, tokenize
from pathcors.kernel.exceptions import CorsSyntaxError


def _texts(text: str) -> list[str]:
    return [t.text for t in tokenize(text)]


class TestTokenize:
    def test_empty_input(self):
        assert tokenize("") == []
        assert tokenize("   \n\t\n") == []

    def test_splits_on_whitespace(self):
        assert _texts("cors  a.com\t/api {") == ["cors", "a.com", "/api", "{"]

    def test_line_numbers_and_file(self):
        tokens = tokenize("cors / {\n    max_age 600\n}\n", "Corsfile")
        assert tokens[0] == Token("cors", 1, "Corsfile")
        assert tokens[3] == Token("max_age", 2, "Corsfile")
        assert tokens[5] == Token("}", 3, "Corsfile")

    def test_comments_are_skipped(self):
        text = "# leading comment\ncors /api # trailing\n"
        tokens = tokenize(text)
        assert [t.text for t in tokens] == ["cors", "/api"]
        assert tokens[0].line == 2

    def test_hash_inside_token_is_literal(self):
        assert _texts("origin a#b") == ["origin", "a#b"]

    def test_quoted_token_keeps_spaces(self):
        assert _texts('methods "GET, POST"') == ["methods", "GET, POST"]

    def test_escaped_quote_inside_quotes(self):
        assert _texts(r'allowed_headers "X-\"Quoted\""') == ["allowed_headers", 'X-"Quoted"']

    def test_other_backslashes_preserved(self):
        assert _texts(r'x "a\b"') == ["x", r"a\b"]

    def test_quoted_token_spanning_lines_keeps_start_line(self):
        tokens = tokenize('a "b\nc" d')
        assert tokens[1] == Token("b\nc", 1, "")
        assert tokens[2].line == 2

    def test_empty_quoted_token(self):
        assert _texts('exposed_headers ""') == ["exposed_headers", ""]

    def test_unterminated_quote_raises(self):
        with pytest.raises(CorsSyntaxError, match="unterminated") as exc_info:
            tokenize('cors / {\n methods "GET\n', "Corsfile")
        assert exc_info.value.line == 2
        assert exc_info.value.file == "Corsfile"
