"""Analytics helpers shared across SpendLog services."""

from analytics.aggregation import (
    category_breakdown,
    category_share,
    compute_category_totals,
    summarize,
    top_category,
)
from analytics.filtering import filter_expenses
from analytics.month_options import build_month_options
from analytics.trend import compute_trend, monthly_totals

__all__ = [
    "category_breakdown",
    "category_share",
    "compute_category_totals",
    "summarize",
    "top_category",
    "filter_expenses",
    "build_month_options",
    "compute_trend",
    "monthly_totals",
]
