"""Caller-owned expense collection and its single mutation."""

from __future__ import annotations

import uuid
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence

from config.logging_setup import get_logger
from core.data_loader import load_seed_expenses
from core.models import Expense

__all__ = ["ExpenseStore", "ExpenseValidationError", "MAX_AMOUNT", "new_expense_id", "parse_amount"]

logger = get_logger("spendlog.store")

# Keeps sums and cent formatting within the default 28-digit decimal context.
MAX_AMOUNT = Decimal("1e12")


class ExpenseValidationError(ValueError):
    """Raised when a new expense is rejected before it reaches the store."""


def new_expense_id() -> str:
    return uuid.uuid4().hex


def parse_amount(amount_text: str) -> Decimal:
    """Parse user-entered amount text into a non-negative ``Decimal``."""

    text = (amount_text or "").strip()
    if not text:
        raise ExpenseValidationError("Amount is required.")
    try:
        amount = Decimal(text)
    except InvalidOperation as exc:
        raise ExpenseValidationError(f"Amount {text!r} is not a number.") from exc
    if not amount.is_finite():
        raise ExpenseValidationError(f"Amount {text!r} is not a finite number.")
    if amount < 0:
        raise ExpenseValidationError("Amount cannot be negative.")
    if amount >= MAX_AMOUNT:
        raise ExpenseValidationError(f"Amount {text!r} is too large.")
    return amount


class ExpenseStore:
    """Ordered expense records, most recently added first.

    Readers get immutable snapshots through :attr:`expenses`, so a derived
    computation never observes a later :meth:`add_expense`.
    """

    def __init__(
        self,
        expenses: Iterable[Expense] = (),
        categories: Optional[Sequence[str]] = None,
    ) -> None:
        self._expenses: list[Expense] = list(expenses)
        self._categories = tuple(categories) if categories is not None else None
        self._ids = {expense.id for expense in self._expenses}
        if len(self._ids) != len(self._expenses):
            raise ValueError("Expense ids must be unique.")

    @classmethod
    def from_seed(
        cls,
        csv_path: str | Path,
        categories: Optional[Sequence[str]] = None,
    ) -> "ExpenseStore":
        return cls(load_seed_expenses(csv_path), categories=categories)

    @property
    def expenses(self) -> tuple[Expense, ...]:
        return tuple(self._expenses)

    @property
    def categories(self) -> Optional[tuple[str, ...]]:
        return self._categories

    def __len__(self) -> int:
        return len(self._expenses)

    def __iter__(self) -> Iterator[Expense]:
        return iter(self.expenses)

    def add_expense(
        self,
        description: str,
        category: str,
        amount_text: str,
        date: date,
    ) -> Expense:
        """Validate and prepend a new expense, returning the created record."""

        try:
            expense = self._build_expense(description, category, amount_text, date)
        except ExpenseValidationError as exc:
            logger.info("Rejected expense %r: %s", description, exc)
            raise

        self._expenses.insert(0, expense)
        self._ids.add(expense.id)
        logger.debug("Added expense %s (%s, %s)", expense.id, expense.category, expense.amount)
        return expense

    def _build_expense(
        self,
        description: str,
        category: str,
        amount_text: str,
        expense_date: date,
    ) -> Expense:
        cleaned = (description or "").strip()
        if not cleaned:
            raise ExpenseValidationError("Description is required.")
        if self._categories is not None and category not in self._categories:
            raise ExpenseValidationError(f"Unknown category: {category!r}.")
        if not isinstance(expense_date, date):
            raise ExpenseValidationError("Date must be a calendar date.")

        amount = parse_amount(amount_text)

        expense_id = new_expense_id()
        while expense_id in self._ids:
            expense_id = new_expense_id()

        return Expense(
            id=expense_id,
            description=cleaned,
            category=category,
            amount=amount,
            date=expense_date,
        )
