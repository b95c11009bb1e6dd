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
"""Tests for CorsOptions and CorsRule."""

import dataclasses

import pytest

from pathcors.cors.options import (
    ANY_ORIGIN,
    DEFAULT_ALLOWED_HEADERS,
    DEFAULT_ALLOWED_METHODS,
    CorsOptions,
    CorsRule,
)


class TestCorsOptionsDefaults:
    def test_defaults(self):
        options = CorsOptions()
        assert options.allowed_origins == (ANY_ORIGIN,)
        assert options.allowed_methods == DEFAULT_ALLOWED_METHODS
        assert options.allow_credentials is None
        assert options.max_age == 0
        assert options.allowed_headers == DEFAULT_ALLOWED_HEADERS
        assert options.exposed_headers == ""

    def test_frozen(self):
        options = CorsOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.max_age = 10  # type: ignore[misc]


class TestAllowsOrigin:
    def test_any_origin(self):
        assert CorsOptions().allows_origin("https://evil.example")

    def test_listed_origin(self):
        options = CorsOptions(allowed_origins=("https://a.com", "https://b.com"))
        assert options.allows_origin("https://b.com")
        assert not options.allows_origin("https://c.com")

    def test_wildcard_among_others(self):
        assert CorsOptions(allowed_origins=("https://a.com", ANY_ORIGIN)).allows_origin("x")

    def test_empty_list_allows_nothing(self):
        assert not CorsOptions(allowed_origins=()).allows_origin("https://a.com")


class TestCorsRule:
    def test_defaults(self):
        rule = CorsRule()
        assert rule.path == "/"
        assert rule.options == CorsOptions()

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            CorsRule().path = "/api"  # type: ignore[misc]
