"""Totals, averages and category shares for a view of expenses."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Mapping, Sequence

from core.models import NO_CATEGORY, CategoryRow, Expense, ExpenseStats

__all__ = [
    "compute_category_totals",
    "summarize",
    "top_category",
    "category_share",
    "category_breakdown",
]

ZERO = Decimal("0")


def compute_category_totals(view: Sequence[Expense]) -> dict[str, Decimal]:
    """Accumulate amounts per category, keyed in first-seen order."""

    totals: dict[str, Decimal] = {}
    for expense in view:
        totals[expense.category] = totals.get(expense.category, ZERO) + expense.amount
    return totals


def summarize(view: Sequence[Expense]) -> ExpenseStats:
    count = len(view)
    total = sum((expense.amount for expense in view), ZERO)
    average = total / count if count else ZERO
    largest = max((expense.amount for expense in view), default=ZERO)
    return ExpenseStats(
        count=count,
        total=total,
        average=average,
        max=largest,
        category_totals=compute_category_totals(view),
    )


def top_category(category_totals: Mapping[str, Decimal]) -> str:
    """Return the category with the largest total.

    Ties go to whichever category was accumulated first; an empty mapping
    yields ``"none"``.
    """

    best: str | None = None
    best_total = ZERO
    for category, amount in category_totals.items():
        if best is None or amount > best_total:
            best, best_total = category, amount
    return best if best is not None else NO_CATEGORY


def category_share(amount: Decimal, total: Decimal) -> int:
    """Whole-number percentage of ``total``; half values round up.

    Shares are rounded independently, so a full breakdown may not add up to
    exactly 100.
    """

    if total <= 0:
        return 0
    return int((Decimal(amount) / Decimal(total) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def category_breakdown(stats: ExpenseStats) -> list[CategoryRow]:
    """Return one row per category, largest spend first."""

    ordered = sorted(stats.category_totals.items(), key=lambda item: item[1], reverse=True)
    return [
        {
            "category": category,
            "amount": amount,
            "percent": category_share(amount, stats.total),
        }
        for category, amount in ordered
    ]
