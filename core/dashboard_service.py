"""Core logic for assembling SpendLog dashboard data."""

from __future__ import annotations

from datetime import date
from typing import Sequence

from analytics.aggregation import category_breakdown, summarize, top_category
from analytics.filtering import filter_expenses
from analytics.month_options import build_month_options
from analytics.trend import compute_trend
from config.logging_setup import get_logger
from core.models import ALL, DashboardData, Expense, MonthKey
from core.months import current_month_key

__all__ = ["prepare_dashboard_data", "resolve_reference_month"]

logger = get_logger("spendlog.dashboard")


def resolve_reference_month(month: str, today: date) -> MonthKey:
    """Pick the month the trend card compares against its predecessor.

    A selected month filter wins; with ``"all"`` the month of ``today`` is
    used.
    """

    if month != ALL:
        return month
    return current_month_key(today)


def prepare_dashboard_data(
    expenses: Sequence[Expense],
    month: str = ALL,
    category: str = ALL,
    *,
    today: date,
) -> DashboardData:
    """Recompute every dashboard figure for one snapshot of the store."""

    view = filter_expenses(expenses, month, category)
    stats = summarize(view)
    reference_month = resolve_reference_month(month, today)
    trend = compute_trend(expenses, reference_month)

    logger.debug(
        "Dashboard for month=%s category=%s: %d of %d expenses",
        month,
        category,
        stats.count,
        len(expenses),
    )

    return {
        "view": view,
        "stats": stats,
        "top_category": top_category(stats.category_totals),
        "category_rows": category_breakdown(stats),
        "trend": trend,
        "reference_month": reference_month,
        "month_options": build_month_options(expenses),
    }
