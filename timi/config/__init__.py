"""Configuration loading, validation, and defaults."""

from timi.config.loader import load_config
from timi.config.schema import TimiConfig

__all__ = ["load_config", "TimiConfig"]
