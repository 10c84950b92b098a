"""Page modules for the SpendLog Streamlit application."""

from .overview import render_page as render_overview_page

__all__ = [
    "render_overview_page",
]
