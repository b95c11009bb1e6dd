"""pathcors core — configuration loading and binding."""

from pathcors.core.config import Config, config_properties

__all__ = ["Config", "config_properties"]
