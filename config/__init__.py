"""Application configuration utilities."""

from .logging_setup import configure_logging, get_logger
from .settings import DEFAULT_CATEGORIES, DEFAULT_CURRENCY_SYMBOL, Settings, get_settings

__all__ = [
    "DEFAULT_CATEGORIES",
    "DEFAULT_CURRENCY_SYMBOL",
    "Settings",
    "configure_logging",
    "get_logger",
    "get_settings",
]
