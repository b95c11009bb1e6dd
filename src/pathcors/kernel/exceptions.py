"""Exception hierarchy for pathcors.

All errors raised by the package inherit from PathCorsException so callers
can catch the whole family at once, or a specific subclass for targeted
handling.

Categories:
- ConfigurationException: configuration could not be loaded or bound
- CorsSyntaxError: a CORS directive block is malformed
"""

from __future__ import annotations


class PathCorsException(Exception):
    """Base exception for all pathcors errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CORS_SYNTAX").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class ConfigurationException(PathCorsException):
    """Configuration could not be loaded, bound or validated."""


class CorsSyntaxError(ConfigurationException):
    """A CORS directive block failed to parse.

    Raised while loading configuration; the server must not start with the
    offending rule set.  Carries the offending token and its location.
    """

    def __init__(
        self,
        message: str,
        token: str = "",
        file: str = "",
        line: int = 0,
    ) -> None:
        location = f"{file}:{line}" if file else f"line {line}"
        super().__init__(
            f"{location} - Syntax error: {message}",
            code="CORS_SYNTAX",
            context={"token": token, "file": file, "line": line},
        )
        self.reason = message
        self.token = token
        self.file = file
        self.line = line
