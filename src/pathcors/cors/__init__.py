"""Path-scoped CORS rules: options, parser, matching and policy port."""

from pathcors.cors.loader import CorsProperties, load_rules
from pathcors.cors.matching import path_matches
from pathcors.cors.options import ANY_ORIGIN, CorsOptions, CorsRule
from pathcors.cors.parser import parse_rules
from pathcors.cors.ports import CorsPolicy

__all__ = [
    "ANY_ORIGIN",
    "CorsOptions",
    "CorsPolicy",
    "CorsProperties",
    "CorsRule",
    "load_rules",
    "parse_rules",
    "path_matches",
]
