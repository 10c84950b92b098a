"""Tests for the month filter options."""

from __future__ import annotations

from analytics.month_options import build_month_options
from conftest import make_expense


def test_month_options_are_distinct_and_ascending():
    expenses = [
        make_expense("1", "10", "2024-04-12"),
        make_expense("2", "10", "2024-03-18"),
        make_expense("3", "10", "2024-04-01"),
    ]

    options = build_month_options(expenses)

    assert options == [
        {"key": "2024-03", "label": "March 2024"},
        {"key": "2024-04", "label": "April 2024"},
    ]


def test_month_options_skip_empty_months():
    expenses = [
        make_expense("1", "10", "2024-06-01"),
        make_expense("2", "10", "2023-11-30"),
        make_expense("3", "10", "2024-01-15"),
    ]

    keys = [option["key"] for option in build_month_options(expenses)]

    assert keys == ["2023-11", "2024-01", "2024-06"]


def test_month_options_keys_sorted_without_duplicates(seed_expenses):
    keys = [option["key"] for option in build_month_options(seed_expenses)]

    assert keys == sorted(set(keys))


def test_month_options_for_empty_store():
    assert build_month_options([]) == []
