"""Built-in Starlette web filters."""

from pathcors.web.adapters.starlette.filters.cors_rules_filter import (
    CorsRulesFilter,
    cors_handler,
    setup,
)
from pathcors.web.adapters.starlette.filters.request_logging_filter import RequestLoggingFilter

__all__ = ["CorsRulesFilter", "RequestLoggingFilter", "cors_handler", "setup"]
