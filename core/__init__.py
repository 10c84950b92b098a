"""Core domain package for the SpendLog application."""

from .data_loader import expenses_frame, load_seed_expenses
from .formatting import TrendDisplay, format_currency, format_short_date, format_trend
from .models import (
    ALL,
    NO_CATEGORY,
    CategoryRow,
    DashboardData,
    Expense,
    ExpenseStats,
    MonthOption,
    MonthTrend,
)
from .months import InvalidMonthKeyError, month_key_of, month_label, previous_month_key
from .store import ExpenseStore, ExpenseValidationError

__all__ = [
    "ALL",
    "NO_CATEGORY",
    "CategoryRow",
    "DashboardData",
    "Expense",
    "ExpenseStats",
    "MonthOption",
    "MonthTrend",
    "ExpenseStore",
    "ExpenseValidationError",
    "InvalidMonthKeyError",
    "TrendDisplay",
    "expenses_frame",
    "format_currency",
    "format_short_date",
    "format_trend",
    "load_seed_expenses",
    "month_key_of",
    "month_label",
    "previous_month_key",
]
