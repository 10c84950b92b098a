"""Selectable months for the dashboard's month filter."""

from __future__ import annotations

from typing import Iterable

from core.models import Expense, MonthOption
from core.months import month_key_of, month_label

__all__ = ["build_month_options"]


def build_month_options(expenses: Iterable[Expense]) -> list[MonthOption]:
    """Return the months that contain at least one expense, oldest first."""

    keys = sorted({month_key_of(expense.date) for expense in expenses})
    return [{"key": key, "label": month_label(key)} for key in keys]
