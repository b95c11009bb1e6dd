"""pathcors — path-scoped CORS rules for Starlette applications."""

from pathcors.core.config import Config
from pathcors.cors import CorsOptions, CorsRule, load_rules, parse_rules, path_matches
from pathcors.directives import Dispenser
from pathcors.kernel.exceptions import CorsSyntaxError
from pathcors.web import CorsRulesFilter, HeaderCorsPolicy, cors_handler, create_app, setup

__version__ = "0.1.0"

__all__ = [
    "Config",
    "CorsOptions",
    "CorsRule",
    "CorsRulesFilter",
    "CorsSyntaxError",
    "Dispenser",
    "HeaderCorsPolicy",
    "cors_handler",
    "create_app",
    "load_rules",
    "parse_rules",
    "path_matches",
    "setup",
]
