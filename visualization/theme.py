"""Shared Plotly theme tokens for SpendLog visualizations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeTokens:
    label_color: str = "#475569"
    label_font: str = "Inter"
    label_size: int = 12
    track_color: str = "rgba(148, 163, 184, 0.25)"
    neutral_grey: str = "#94A3B8"
    category_palette: tuple[str, ...] = (
        "#0C6FFD",
        "#5DA9FF",
        "#FF3B30",
        "#F97316",
        "#22C55E",
        "#7C3AED",
        "#F59E0B",
        "#FACC15",
    )


_TOKENS = ThemeTokens()


def theme_tokens() -> ThemeTokens:
    """Return the shared, frozen visualization tokens."""

    return _TOKENS
