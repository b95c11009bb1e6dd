"""pathcors logging — logging port and its structlog adapter."""

from pathcors.logging.port import LoggingPort
from pathcors.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
