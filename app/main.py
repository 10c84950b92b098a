"""SpendLog expense dashboard."""

from __future__ import annotations

from datetime import date

import streamlit as st

from analytics.month_options import build_month_options
from app.layout import inject_css, render_sidebar_filters
from app.pages import render_overview_page
from config import Settings, configure_logging, get_logger, get_settings
from core import ExpenseStore
from core.dashboard_service import prepare_dashboard_data

STORE_KEY = "expense_store"

logger = get_logger("spendlog.app")


def _get_store(settings: Settings) -> ExpenseStore:
    """Return this session's expense store, seeding it on first use."""

    store = st.session_state.get(STORE_KEY)
    if store is None:
        try:
            store = ExpenseStore.from_seed(settings.seed_path, categories=settings.categories)
        except FileNotFoundError:
            logger.warning("Seed file %s not found; starting with an empty store", settings.seed_path)
            store = ExpenseStore(categories=settings.categories)
        st.session_state[STORE_KEY] = store
    return store


def main() -> None:
    """Application entrypoint for the SpendLog dashboard."""

    st.set_page_config(
        page_title="SpendLog | Expenses",
        page_icon="💸",
        layout="wide",
    )

    settings = get_settings()
    configure_logging(settings.log_level)
    inject_css()

    store = _get_store(settings)
    snapshot = store.expenses

    month, category = render_sidebar_filters(build_month_options(snapshot), settings.categories)

    # The trend compares the selected month, or the current calendar month
    # when no month filter is active.
    data = prepare_dashboard_data(snapshot, month, category, today=date.today())
    render_overview_page(data, store, settings)


if __name__ == "__main__":
    main()
