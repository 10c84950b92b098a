"""Overview dashboard page layout."""

from __future__ import annotations

from datetime import date
from typing import Sequence

import streamlit as st

from app.layout import card, stat_card
from config import Settings
from core import (
    NO_CATEGORY,
    DashboardData,
    Expense,
    ExpenseStore,
    ExpenseValidationError,
    expenses_frame,
    format_currency,
    format_short_date,
    format_trend,
)
from visualization import build_category_chart

FORM_DESCRIPTION_KEY = "form_description"
FORM_CATEGORY_KEY = "form_category"
FORM_AMOUNT_KEY = "form_amount"
FORM_DATE_KEY = "form_date"
FORM_ERROR_KEY = "form_error"


def _render_stat_cards(data: DashboardData, symbol: str) -> None:
    stats = data["stats"]
    trend_display = format_trend(data["trend"], symbol)
    top = data["top_category"]

    columns = st.columns(4, gap="medium")
    with columns[0]:
        stat_card("Total spent", format_currency(stats.total, symbol), f"Across {stats.count} expenses")
    with columns[1]:
        stat_card("Average expense", format_currency(stats.average, symbol), "Per logged entry")
    with columns[2]:
        stat_card(
            "Largest expense",
            format_currency(stats.max, symbol) if stats.count else "-",
            f"Category: {top}" if top != NO_CATEGORY else "No data",
        )
    with columns[3]:
        stat_card("Monthly trend", trend_display.value, trend_display.helper, tone=trend_display.tone)


def _submit_expense(store: ExpenseStore) -> None:
    """Form callback: add the expense and clear the transient inputs."""

    state = st.session_state
    try:
        store.add_expense(
            state.get(FORM_DESCRIPTION_KEY, ""),
            state.get(FORM_CATEGORY_KEY, ""),
            state.get(FORM_AMOUNT_KEY, ""),
            state.get(FORM_DATE_KEY) or date.today(),
        )
    except ExpenseValidationError as exc:
        state[FORM_ERROR_KEY] = str(exc)
        return

    state[FORM_ERROR_KEY] = None
    state[FORM_DESCRIPTION_KEY] = ""
    state[FORM_AMOUNT_KEY] = ""


def _render_expense_form(store: ExpenseStore, categories: Sequence[str]) -> None:
    with st.form("add-expense", clear_on_submit=False):
        columns = st.columns((2, 1.2, 1, 1, 0.8))
        columns[0].text_input("Description", key=FORM_DESCRIPTION_KEY, placeholder="Description")
        columns[1].selectbox("Category", list(categories), key=FORM_CATEGORY_KEY)
        columns[2].text_input("Amount", key=FORM_AMOUNT_KEY, placeholder="0.00")
        columns[3].date_input("Date", key=FORM_DATE_KEY, value=date.today())
        columns[4].form_submit_button("Add expense", on_click=_submit_expense, args=(store,))

    error = st.session_state.get(FORM_ERROR_KEY)
    if error:
        st.error(error)


def _render_expense_table(view: list[Expense], symbol: str) -> None:
    if not view:
        st.info("No expenses logged for this view.")
        return

    frame = expenses_frame(view)
    frame["Date"] = [format_short_date(expense.date) for expense in view]
    st.dataframe(
        frame,
        hide_index=True,
        use_container_width=True,
        column_config={
            "Amount": st.column_config.NumberColumn("Amount", format=f"{symbol}%.2f"),
        },
    )


def _render_category_card(data: DashboardData, symbol: str) -> None:
    if not data["view"]:
        st.info("Add expenses or adjust the filters to see category insights.")
        return
    chart = build_category_chart(data["category_rows"], currency_symbol=symbol)
    st.plotly_chart(chart, use_container_width=True, key="category-bars")


def render_page(data: DashboardData, store: ExpenseStore, settings: Settings) -> None:
    """Render the overview dashboard page."""

    symbol = settings.currency_symbol
    st.title("Expense Dashboard")
    st.caption("Track spending, spot trends, and stay on top of your budget.")

    _render_stat_cards(data, symbol)

    main_col, side_col = st.columns([2, 1], gap="medium")
    with main_col:
        with card("Expenses", suffix=f"{data['stats'].count} shown"):
            st.caption("Quickly capture a new expense or review past activity.")
            _render_expense_form(store, settings.categories)
            _render_expense_table(data["view"], symbol)
    with side_col:
        with card("Category breakdown"):
            _render_category_card(data, symbol)


__all__ = ["render_page"]
