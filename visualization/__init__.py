"""Visualization utilities for SpendLog dashboards."""

from .charts import build_category_chart, category_frame
from .theme import theme_tokens

__all__ = [
    "build_category_chart",
    "category_frame",
    "theme_tokens",
]
