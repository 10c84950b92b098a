"""Tests for month key derivation and month arithmetic."""

from __future__ import annotations

from datetime import date, datetime

import pandas as pd
import pytest

from core.months import (
    InvalidMonthKeyError,
    MONTH_NAMES,
    current_month_key,
    month_key_of,
    month_label,
    next_month_key,
    parse_month_key,
    previous_month_key,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (date(2024, 4, 1), "2024-04"),
        (date(2024, 12, 31), "2024-12"),
        (date(999, 1, 5), "0999-01"),
        (datetime(2024, 3, 31, 23, 59), "2024-03"),
        (pd.Timestamp("2024-01-01"), "2024-01"),
    ],
)
def test_month_key_of_zero_pads(value, expected):
    assert month_key_of(value) == expected


def test_previous_month_key_rolls_back_over_year_boundary():
    assert previous_month_key("2024-01") == "2023-12"
    assert previous_month_key("2024-04") == "2024-03"
    assert previous_month_key("2024-10") == "2024-09"


def test_next_month_key_rolls_forward_over_year_boundary():
    assert next_month_key("2023-12") == "2024-01"
    assert next_month_key("2024-09") == "2024-10"


def test_previous_month_key_matches_month_key_of_previous_month():
    for month in range(1, 13):
        key = month_key_of(date(2024, month, 15))
        assert next_month_key(previous_month_key(key)) == key


@pytest.mark.parametrize("bad_key", ["2024-13", "2024-00", "2024-4", "24-04", "all", "", "2024/04"])
def test_parse_month_key_rejects_malformed_keys(bad_key):
    with pytest.raises(InvalidMonthKeyError):
        parse_month_key(bad_key)


def test_invalid_month_key_error_is_value_error():
    with pytest.raises(ValueError):
        previous_month_key("April")


def test_parse_month_key_returns_year_and_month():
    assert parse_month_key("2024-04") == (2024, 4)


def test_month_label_uses_full_month_name():
    assert month_label("2024-04") == "April 2024"
    assert month_label("2023-12") == "December 2023"
    assert month_label("2025-09") == "September 2025"


def test_month_labels_use_fixed_english_names():
    labels = [month_label(f"2024-{month:02d}") for month in range(1, 13)]

    assert labels[0] == "January 2024"
    assert labels[4] == "May 2024"
    assert [label.split()[0] for label in labels] == list(MONTH_NAMES)
    assert len(set(labels)) == 12


def test_current_month_key_uses_supplied_today():
    assert current_month_key(date(2025, 2, 28)) == "2025-02"
