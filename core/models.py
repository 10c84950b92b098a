"""Shared data model definitions for the SpendLog dashboard."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional, TypedDict

ALL = "all"
NO_CATEGORY = "none"

MonthKey = str


@dataclass(frozen=True)
class Expense:
    id: str
    description: str
    category: str
    amount: Decimal
    date: date


class MonthOption(TypedDict):
    key: MonthKey
    label: str


class CategoryRow(TypedDict):
    category: str
    amount: Decimal
    percent: int


@dataclass(frozen=True)
class ExpenseStats:
    """Summary figures for one view of the expense list."""

    count: int
    total: Decimal
    average: Decimal
    max: Decimal
    category_totals: dict[str, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class MonthTrend:
    month_key: MonthKey
    previous_month_key: MonthKey
    current_total: Decimal
    previous_total: Decimal
    delta_percent: Optional[Decimal]


class DashboardData(TypedDict):
    view: list[Expense]
    stats: ExpenseStats
    top_category: str
    category_rows: list[CategoryRow]
    trend: MonthTrend
    reference_month: MonthKey
    month_options: list[MonthOption]


__all__ = [
    "ALL",
    "NO_CATEGORY",
    "MonthKey",
    "Expense",
    "MonthOption",
    "CategoryRow",
    "ExpenseStats",
    "MonthTrend",
    "DashboardData",
]
