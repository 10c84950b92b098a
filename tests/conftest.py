"""Shared fixtures for the SpendLog test suite."""

from __future__ import annotations

import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest
import streamlit as st

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.models import Expense


@pytest.fixture(autouse=True)
def clear_streamlit_secrets(monkeypatch):
    """Provide an empty secrets mapping so tests don't rely on Streamlit runtime."""

    monkeypatch.setattr(st, "secrets", {}, raising=False)


def make_expense(
    expense_id: str,
    amount: str,
    when: str,
    category: str = "Food",
    description: str | None = None,
) -> Expense:
    return Expense(
        id=expense_id,
        description=description or f"Expense {expense_id}",
        category=category,
        amount=Decimal(amount),
        date=date.fromisoformat(when),
    )


@pytest.fixture()
def seed_expenses() -> list[Expense]:
    """The dashboard's bundled seed rows, in file order."""

    return [
        make_expense("1", "1200", "2024-04-01", "Housing", "Rent"),
        make_expense("2", "164.25", "2024-04-06", "Food", "Groceries"),
        make_expense("3", "45", "2024-04-04", "Health", "Gym Membership"),
        make_expense("4", "10.99", "2024-03-24", "Subscriptions", "Spotify"),
        make_expense("5", "68.5", "2024-03-30", "Food", "Dinner Out"),
        make_expense("6", "52.8", "2024-04-10", "Transportation", "Gas"),
        make_expense("7", "32", "2024-04-12", "Entertainment", "Movie Night"),
        make_expense("8", "86.3", "2024-03-18", "Utilities", "Electricity Bill"),
        make_expense("9", "12.5", "2024-04-08", "Food", "Coffee"),
        make_expense("10", "120", "2024-03-12", "Health", "Therapy Session"),
    ]
