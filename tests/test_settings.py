"""Tests for settings and logging configuration."""

from __future__ import annotations

import io
import logging

import pytest
import streamlit as st

import config.logging_setup as logging_setup
from config import DEFAULT_CATEGORIES, Settings, configure_logging, get_logger, get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def restore_logging(monkeypatch):
    logger = logging.getLogger(logging_setup.PKG_LOGGER_NAME)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_defaults():
    settings = get_settings()

    assert settings.currency_symbol == "$"
    assert settings.categories == DEFAULT_CATEGORIES
    assert settings.seed_path.name == "seed.csv"
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SPENDLOG_CURRENCY_SYMBOL", "€")
    monkeypatch.setenv("SPENDLOG_CATEGORIES", '["Food", "Other"]')

    settings = Settings()

    assert settings.currency_symbol == "€"
    assert settings.categories == ("Food", "Other")


def test_streamlit_secrets_override(monkeypatch):
    monkeypatch.setattr(
        st,
        "secrets",
        {"spendlog": {"currency_symbol": "£", "categories": ["Rent", "Food"]}},
        raising=False,
    )

    settings = get_settings()

    assert settings.currency_symbol == "£"
    assert settings.categories == ("Rent", "Food")
    assert settings.log_level == "INFO"


def test_configure_logging_attaches_single_handler(restore_logging):
    stream = io.StringIO()

    configure_logging("debug", stream=stream)
    configure_logging("error", stream=stream)

    stream_handlers = [h for h in restore_logging.handlers if isinstance(h, logging.StreamHandler)]
    assert len(stream_handlers) == 1
    assert restore_logging.level == logging.DEBUG

    get_logger("store").debug("hello")
    assert "spendlog.store DEBUG hello" in stream.getvalue()


def test_configure_logging_reads_env_level(monkeypatch, restore_logging):
    monkeypatch.setenv("SPENDLOG_LOG_LEVEL", "warning")

    configure_logging(None, stream=io.StringIO())

    assert restore_logging.level == logging.WARNING


def test_get_logger_namespaces_under_package():
    assert get_logger("spendlog.trend").name == "spendlog.trend"
    assert get_logger("charts").name == "spendlog.charts"
