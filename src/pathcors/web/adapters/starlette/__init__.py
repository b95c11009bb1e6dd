"""Starlette adapter — filter chain, default CORS policy and app factory."""

from pathcors.web.adapters.starlette.cors_policy import HeaderCorsPolicy
from pathcors.web.adapters.starlette.filter_chain import WebFilterChainMiddleware
from pathcors.web.adapters.starlette.filters import (
    CorsRulesFilter,
    RequestLoggingFilter,
    cors_handler,
    setup,
)
from pathcors.web.adapters.starlette.app import create_app

__all__ = [
    "CorsRulesFilter",
    "HeaderCorsPolicy",
    "RequestLoggingFilter",
    "WebFilterChainMiddleware",
    "cors_handler",
    "create_app",
    "setup",
]
