"""Centralised configuration handling for SpendLog."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import streamlit as st
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent

DEFAULT_CURRENCY_SYMBOL = "$"
DEFAULT_SEED_PATH = BASE_DIR / "data" / "seed.csv"
DEFAULT_CATEGORIES: tuple[str, ...] = (
    "Housing",
    "Food",
    "Transportation",
    "Utilities",
    "Health",
    "Entertainment",
    "Subscriptions",
    "Other",
)


def _streamlit_section(name: str) -> Mapping[str, Any] | None:
    """Return a mapping from Streamlit secrets for the given section."""

    try:
        if hasattr(st, "secrets") and name in st.secrets:
            section = st.secrets[name]
            if isinstance(section, Mapping):
                return section
            return dict(section)
    except Exception:  # pragma: no cover - accessing secrets may fail in tests
        return None
    return None


class Settings(BaseSettings):
    """Application settings sourced from env vars and Streamlit secrets."""

    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    categories: tuple[str, ...] = DEFAULT_CATEGORIES
    seed_path: Path = DEFAULT_SEED_PATH
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="SPENDLOG_", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Load and cache application settings."""

    overrides: dict[str, Any] = {}
    secrets_section = _streamlit_section("spendlog")
    if secrets_section:
        categories = secrets_section.get("categories")
        overrides = {
            "currency_symbol": secrets_section.get("currency_symbol"),
            "categories": tuple(categories) if categories else None,
            "seed_path": secrets_section.get("seed_path"),
            "log_level": secrets_section.get("log_level"),
        }

    return Settings(**{k: v for k, v in overrides.items() if v is not None})
