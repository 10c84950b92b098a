"""Tests for the month and category filters."""

from __future__ import annotations

import pytest

from analytics.filtering import filter_expenses
from core.months import InvalidMonthKeyError


def _ids(expenses):
    return [expense.id for expense in expenses]


def test_all_filters_return_input_unchanged(seed_expenses):
    view = filter_expenses(seed_expenses, "all", "all")

    assert view == seed_expenses
    assert view is not seed_expenses


def test_month_filter_keeps_input_order(seed_expenses):
    view = filter_expenses(seed_expenses, month="2024-03")

    assert _ids(view) == ["4", "5", "8", "10"]


def test_category_filter(seed_expenses):
    view = filter_expenses(seed_expenses, category="Food")

    assert _ids(view) == ["2", "5", "9"]


def test_combined_filters(seed_expenses):
    view = filter_expenses(seed_expenses, "2024-04", "Food")

    assert _ids(view) == ["2", "9"]


def test_filter_is_idempotent(seed_expenses):
    once = filter_expenses(seed_expenses, "2024-04", "Health")
    twice = filter_expenses(once, "2024-04", "Health")

    assert twice == once


def test_filters_commute(seed_expenses):
    month_first = filter_expenses(filter_expenses(seed_expenses, month="2024-03"), category="Health")
    category_first = filter_expenses(filter_expenses(seed_expenses, category="Health"), month="2024-03")

    assert month_first == category_first == filter_expenses(seed_expenses, "2024-03", "Health")


def test_filter_with_no_matches_returns_empty_list(seed_expenses):
    assert filter_expenses(seed_expenses, "2023-01", "all") == []
    assert filter_expenses(seed_expenses, "all", "Other") == []


def test_filter_accepts_any_iterable(seed_expenses):
    view = filter_expenses(iter(seed_expenses), category="Housing")

    assert _ids(view) == ["1"]


def test_malformed_month_filter_is_rejected(seed_expenses):
    with pytest.raises(InvalidMonthKeyError):
        filter_expenses(seed_expenses, month="April")
