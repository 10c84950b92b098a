"""Streamlit application package for SpendLog."""

from .main import main

__all__ = ["main"]
