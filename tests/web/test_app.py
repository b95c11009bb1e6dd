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
"""End-to-end tests for create_app() with path-scoped CORS rules."""

from __future__ import annotations

import pytest
import structlog
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from pathcors.core.config import Config
from pathcors.cors.parser import parse_rules
from pathcors.directives.dispenser import Dispenser
from pathcors.kernel.exceptions import CorsSyntaxError
from pathcors.web.adapters.starlette.app import create_app

DIRECTIVES = """
cors https://a.com /api {
    methods "GET, POST"
    allow_credentials true
    max_age 600
    exposed_headers X-Request-Id
}

cors /
"""


class _Counter:
    def __init__(self) -> None:
        self.calls = 0

    async def endpoint(self, request: Request) -> JSONResponse:
        self.calls += 1
        return JSONResponse({"path": request.url.path})


@pytest.fixture
def handler() -> _Counter:
    return _Counter()


@pytest.fixture
def client(handler: _Counter) -> TestClient:
    rules = parse_rules(Dispenser.from_text(DIRECTIVES))
    routes = [Route("/api/widgets", handler.endpoint), Route("/public", handler.endpoint)]
    return TestClient(create_app(rules, routes=routes))


class TestActualRequests:
    def test_allowed_origin_gets_headers(self, client):
        resp = client.get("/api/widgets", headers={"Origin": "https://a.com"})
        assert resp.status_code == 200
        assert resp.json() == {"path": "/api/widgets"}
        assert resp.headers["access-control-allow-origin"] == "https://a.com"
        assert resp.headers["access-control-allow-credentials"] == "true"
        assert resp.headers["access-control-expose-headers"] == "X-Request-Id"

    def test_first_match_wins_even_when_origin_rejected(self, client):
        # The permissive "/" rule would allow any origin, but "/api" matched first.
        resp = client.get("/api/widgets", headers={"Origin": "https://evil.com"})
        assert resp.status_code == 200
        assert "access-control-allow-origin" not in resp.headers

    def test_catch_all_rule_allows_any_origin(self, client):
        resp = client.get("/public", headers={"Origin": "https://evil.com"})
        assert resp.headers["access-control-allow-origin"] == "https://evil.com"
        assert "access-control-allow-credentials" not in resp.headers

    def test_no_origin_no_headers(self, client):
        resp = client.get("/public")
        assert resp.status_code == 200
        assert "access-control-allow-origin" not in resp.headers


class TestPreflightRequests:
    def test_preflight_answered_without_handler(self, client, handler):
        resp = client.options(
            "/api/widgets",
            headers={"Origin": "https://a.com", "Access-Control-Request-Method": "POST"},
        )
        assert resp.status_code == 200
        assert resp.content == b""
        assert resp.headers["access-control-allow-origin"] == "https://a.com"
        assert resp.headers["access-control-allow-methods"] == "GET, POST"
        assert resp.headers["access-control-max-age"] == "600"
        assert handler.calls == 0

    def test_preflight_from_rejected_origin_still_short_circuits(self, client, handler):
        resp = client.options(
            "/api/widgets",
            headers={"Origin": "https://evil.com", "Access-Control-Request-Method": "POST"},
        )
        assert resp.status_code == 200
        assert "access-control-allow-origin" not in resp.headers
        assert handler.calls == 0

    def test_plain_options_reaches_router(self, client):
        # Without Access-Control-Request-Method this is not a preflight; the
        # GET-only route answers 405.
        resp = client.options("/api/widgets", headers={"Origin": "https://a.com"})
        assert resp.status_code == 405
        assert resp.headers["access-control-allow-origin"] == "https://a.com"


class TestCreateAppFromConfig:
    def test_rules_loaded_from_config(self, handler):
        config = Config({"pathcors": {"cors": {"directives": "cors https://a.com /"}}})
        client = TestClient(create_app(config=config, routes=[Route("/public", handler.endpoint)]))
        resp = client.get("/public", headers={"Origin": "https://a.com"})
        assert resp.headers["access-control-allow-origin"] == "https://a.com"

    def test_invalid_config_fails_before_serving(self):
        config = Config({"pathcors": {"cors": {"directives": "cors / {\n  max_age soon\n}"}}})
        with pytest.raises(CorsSyntaxError, match="max_age must be a valid integer"):
            create_app(config=config)

    def test_no_rules_no_headers(self, handler):
        client = TestClient(create_app(routes=[Route("/public", handler.endpoint)]))
        resp = client.get("/public", headers={"Origin": "https://a.com"})
        assert resp.status_code == 200
        assert "access-control-allow-origin" not in resp.headers


class TestCreateAppLogging:
    def teardown_method(self):
        structlog.reset_defaults()

    def test_json_format_from_config(self):
        config = Config({"pathcors": {"cors": {"directives": "cors /"}, "logging": {"format": "json"}}})
        create_app(config=config)
        assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)

    def test_console_format_by_default(self):
        create_app(config=Config({"pathcors": {"cors": {"directives": "cors /"}}}))
        assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)
