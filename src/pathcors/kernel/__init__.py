"""pathcors kernel — exception hierarchy with zero external dependencies."""

from pathcors.kernel.exceptions import (
    ConfigurationException,
    CorsSyntaxError,
    PathCorsException,
)

__all__ = [
    "ConfigurationException",
    "CorsSyntaxError",
    "PathCorsException",
]
