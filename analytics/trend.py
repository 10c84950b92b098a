"""Month-over-month spending trend."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional

from core.models import Expense, MonthKey, MonthTrend
from core.months import month_key_of, parse_month_key, previous_month_key

__all__ = ["monthly_totals", "compute_trend"]

ZERO = Decimal("0")


def monthly_totals(expenses: Iterable[Expense]) -> dict[MonthKey, Decimal]:
    totals: dict[MonthKey, Decimal] = {}
    for expense in expenses:
        key = month_key_of(expense.date)
        totals[key] = totals.get(key, ZERO) + expense.amount
    return totals


def compute_trend(expenses: Iterable[Expense], reference_month_key: MonthKey) -> MonthTrend:
    """Compare the reference month's total with the month before it.

    ``expenses`` should be the whole store rather than a filtered view. The
    percentage change is ``None`` when the previous month has no spend.
    """

    parse_month_key(reference_month_key)
    totals = monthly_totals(expenses)
    previous_key = previous_month_key(reference_month_key)

    current_total = totals.get(reference_month_key, ZERO)
    previous_total = totals.get(previous_key, ZERO)

    delta_percent: Optional[Decimal] = None
    if previous_total != 0:
        delta_percent = (current_total - previous_total) / previous_total * 100

    return MonthTrend(
        month_key=reference_month_key,
        previous_month_key=previous_key,
        current_total=current_total,
        previous_total=previous_total,
        delta_percent=delta_percent,
    )
