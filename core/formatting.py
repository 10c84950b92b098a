"""Formatting helpers for SpendLog summaries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from core.models import MonthTrend
from core.months import MONTH_NAMES

__all__ = ["TrendDisplay", "format_currency", "format_short_date", "format_trend"]


@dataclass(frozen=True)
class TrendDisplay:
    value: str
    helper: str
    tone: str


def format_currency(value: Decimal | float, symbol: str = "$") -> str:
    amount = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_short_date(value: date) -> str:
    return f"{MONTH_NAMES[value.month - 1][:3]} {value.day}"


def format_trend(trend: MonthTrend, symbol: str = "$") -> TrendDisplay:
    if trend.delta_percent is None:
        return TrendDisplay(value="N/A", helper="Add previous month data", tone="positive")

    delta = trend.delta_percent.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    sign = "+" if trend.delta_percent > 0 else ""
    helper = (
        f"{format_currency(trend.previous_total, symbol)} → "
        f"{format_currency(trend.current_total, symbol)}"
    )
    tone = "negative" if trend.delta_percent > 0 else "positive"
    return TrendDisplay(value=f"{sign}{delta}%", helper=helper, tone=tone)
