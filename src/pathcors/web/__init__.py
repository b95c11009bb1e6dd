"""pathcors web layer — filter port plus the default Starlette adapter."""

from pathcors.web.adapters.starlette import (
    CorsRulesFilter,
    HeaderCorsPolicy,
    RequestLoggingFilter,
    WebFilterChainMiddleware,
    cors_handler,
    create_app,
    setup,
)
from pathcors.web.ports.filter import CallNext, WebFilter

__all__ = [
    "CallNext",
    "CorsRulesFilter",
    "HeaderCorsPolicy",
    "RequestLoggingFilter",
    "WebFilter",
    "WebFilterChainMiddleware",
    "cors_handler",
    "create_app",
    "setup",
]
