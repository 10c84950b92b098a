"""Month and category filters over the expense list."""

from __future__ import annotations

from typing import Iterable

from core.models import ALL, Expense
from core.months import month_key_of, parse_month_key

__all__ = ["filter_expenses"]


def filter_expenses(
    expenses: Iterable[Expense],
    month: str = ALL,
    category: str = ALL,
) -> list[Expense]:
    """Return the expenses matching the active filters, in input order.

    ``month`` is ``"all"`` or a ``YYYY-MM`` key, ``category`` is ``"all"`` or a
    category name. A filter set to ``"all"`` matches every record.

    A well-formed month with no records yields an empty list; a malformed
    month key raises ``InvalidMonthKeyError``.
    """

    if month != ALL:
        parse_month_key(month)

    view: list[Expense] = []
    for expense in expenses:
        if month != ALL and month_key_of(expense.date) != month:
            continue
        if category != ALL and expense.category != category:
            continue
        view.append(expense)
    return view
