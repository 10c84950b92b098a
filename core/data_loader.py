"""Seed data loading for SpendLog's expense store."""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Final

import pandas as pd

from config.logging_setup import get_logger
from core.models import Expense

__all__ = ["load_seed_expenses", "expenses_frame"]

logger = get_logger("spendlog.data_loader")

_CACHE_SIZE: Final[int] = 8
REQUIRED_COLUMNS: Final[tuple[str, ...]] = ("id", "description", "category", "amount", "date")


@lru_cache(maxsize=_CACHE_SIZE)
def _read_seed(path: Path) -> tuple[Expense, ...]:
    df = pd.read_csv(path, dtype={"id": str, "amount": str})
    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        raise ValueError(f"Seed CSV {path} is missing columns: {', '.join(missing)}")

    df = df.dropna(subset=list(REQUIRED_COLUMNS))
    df["date"] = pd.to_datetime(df["date"], format="%Y-%m-%d")
    expenses = tuple(
        Expense(
            id=str(record["id"]).strip(),
            description=str(record["description"]).strip(),
            category=str(record["category"]).strip(),
            amount=Decimal(str(record["amount"]).strip()),
            date=pd.Timestamp(record["date"]).date(),
        )
        for record in df.to_dict(orient="records")
    )
    logger.info("Loaded %d seed expenses from %s", len(expenses), path)
    return expenses


def load_seed_expenses(csv_path: str | Path) -> tuple[Expense, ...]:
    """Return the seed expenses stored in ``csv_path`` in file order.

    Results are cached per resolved path so reruns of the dashboard do not
    re-read the file. The file order is kept as insertion order and is not
    sorted by date.
    """

    path = Path(csv_path).resolve()
    if not path.exists():
        raise FileNotFoundError(f"CSV file not found: {path}")
    return _read_seed(path)


def expenses_frame(expenses: list[Expense] | tuple[Expense, ...]) -> pd.DataFrame:
    """Return a display dataframe for the expense table, keeping input order."""

    columns = ["Description", "Category", "Date", "Amount"]
    if not expenses:
        return pd.DataFrame(columns=columns)

    return pd.DataFrame(
        [
            {
                "Description": expense.description,
                "Category": expense.category,
                "Date": pd.Timestamp(expense.date),
                "Amount": float(expense.amount),
            }
            for expense in expenses
        ],
        columns=columns,
    )
