"""Shared layout primitives for the SpendLog Streamlit app."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Sequence

import streamlit as st

from core.models import ALL, MonthOption

MONTH_FILTER_KEY = "month_filter"
CATEGORY_FILTER_KEY = "category_filter"


def inject_css() -> None:
    """Inject global CSS tokens and component styling into the Streamlit app."""

    st.markdown(
        """
        <style>
          :root {
            --gap: 16px;
            --radius: 12px;
            --card-bg: #FFFFFF;
            --border: #E6EAF2;
            --shadow: 0 1px 2px rgba(16, 24, 40, 0.05), 0 1px 3px rgba(16, 24, 40, 0.06);
          }

          body, [data-testid="stAppViewContainer"] > .main {
            background: #F4F6FB;
          }

          .block-container {
            max-width: 1200px;
            padding-top: 2.5rem;
            padding-bottom: 4rem;
          }

          .sl-card-anchor {
            display: none;
          }

          [data-testid="stVerticalBlock"]:has(> .sl-card-anchor) {
            background: var(--card-bg);
            border: 1px solid var(--border);
            border-radius: var(--radius);
            box-shadow: var(--shadow);
            padding: 16px;
            margin-bottom: var(--gap);
            display: flex;
            flex-direction: column;
            gap: 12px;
          }

          .sl-card__head {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 12px;
            font-weight: 600;
            color: #111827;
            margin-bottom: 4px;
            flex-wrap: wrap;
          }

          .sl-card__title {
            font-size: 1.05rem;
          }

          .sl-chip {
            font-size: 12px;
            padding: 2px 8px;
            border-radius: 999px;
            border: 1px solid #D6DEFF;
            background: #F0F4FF;
            color: #3346FF;
            white-space: nowrap;
          }

          .sl-stat {
            display: flex;
            flex-direction: column;
            gap: 4px;
          }

          .sl-stat__label {
            font-size: 0.85rem;
            color: #5C6478;
            margin: 0;
          }

          .sl-stat__value {
            font-size: 1.6rem;
            font-weight: 700;
            color: #111827;
            margin: 0;
          }

          .sl-stat__helper {
            font-size: 0.8rem;
            color: #6B7280;
            margin: 0;
          }

          .sl-stat--negative .sl-stat__value {
            color: #DC2626;
          }

          .sl-stat--positive .sl-stat__value {
            color: #16A34A;
          }

          @media (min-width: 1200px) {
            [data-testid="stVerticalBlock"]:has(> .sl-card-anchor) {
              padding: 24px;
            }
            :root {
              --gap: 24px;
            }
          }
        </style>
        """,
        unsafe_allow_html=True,
    )


@contextmanager
def card(title: str, suffix: str | None = None):
    """Render content inside a reusable SpendLog card."""

    chip_html = f'<span class="sl-chip">{suffix}</span>' if suffix else ""
    container = st.container()
    with container:
        st.markdown('<div class="sl-card-anchor"></div>', unsafe_allow_html=True)
        st.markdown(
            f'<div class="sl-card__head"><span class="sl-card__title">{title}</span>'
            f"{chip_html}</div>",
            unsafe_allow_html=True,
        )
        yield


def stat_card(label: str, value: str, helper: str | None = None, tone: str = "neutral") -> None:
    """Render a single headline figure."""

    helper_html = f'<p class="sl-stat__helper">{helper}</p>' if helper else ""
    with card(label):
        st.markdown(
            f'<div class="sl-stat sl-stat--{tone}">'
            f'<p class="sl-stat__value">{value}</p>{helper_html}</div>',
            unsafe_allow_html=True,
        )


def _reset_filters() -> None:
    st.session_state[MONTH_FILTER_KEY] = ALL
    st.session_state[CATEGORY_FILTER_KEY] = ALL


def render_sidebar_filters(
    month_options: Sequence[MonthOption],
    categories: Sequence[str],
) -> tuple[str, str]:
    """Render the month and category filters and return the active pair."""

    labels = {option["key"]: option["label"] for option in month_options}
    month_keys = [ALL, *labels]
    category_values = [ALL, *categories]

    if st.session_state.get(MONTH_FILTER_KEY) not in month_keys:
        st.session_state[MONTH_FILTER_KEY] = ALL
    if st.session_state.get(CATEGORY_FILTER_KEY) not in category_values:
        st.session_state[CATEGORY_FILTER_KEY] = ALL

    with st.sidebar:
        st.markdown("### Filters")
        month = st.selectbox(
            "Month",
            month_keys,
            key=MONTH_FILTER_KEY,
            format_func=lambda key: "All months" if key == ALL else labels[key],
        )
        category = st.selectbox(
            "Category",
            category_values,
            key=CATEGORY_FILTER_KEY,
            format_func=lambda value: "All categories" if value == ALL else value,
        )
        st.button("Reset", on_click=_reset_filters, type="secondary")

    return month, category


__all__ = [
    "CATEGORY_FILTER_KEY",
    "MONTH_FILTER_KEY",
    "card",
    "inject_css",
    "render_sidebar_filters",
    "stat_card",
]
