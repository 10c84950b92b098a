"""Plotly chart builders for the SpendLog dashboard."""

from __future__ import annotations

from typing import Sequence

import pandas as pd
import plotly.graph_objects as go

from core.models import CategoryRow

from .theme import theme_tokens

TOKENS = theme_tokens()

__all__ = ["build_category_chart", "category_frame"]


def _empty_plotly_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        annotations=[
            dict(
                text=message,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(color=TOKENS.neutral_grey, size=14, family=TOKENS.label_font),
            )
        ],
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        margin=dict(l=0, r=0, t=20, b=0),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def category_frame(rows: Sequence[CategoryRow]) -> pd.DataFrame:
    """Convert breakdown rows into a dataframe, keeping their order."""

    return pd.DataFrame(
        [
            {
                "Category": row["category"],
                "Amount": float(row["amount"]),
                "Percent": int(row["percent"]),
            }
            for row in rows
        ],
        columns=["Category", "Amount", "Percent"],
    )


def build_category_chart(rows: Sequence[CategoryRow], currency_symbol: str = "$") -> go.Figure:
    """Render horizontal share bars, largest category on top."""

    data = category_frame(rows)
    if data.empty:
        return _empty_plotly_figure("Add expenses or adjust the filters to see category insights.")

    palette = list(TOKENS.category_palette)
    colors = [palette[index % len(palette)] for index in range(len(data))]
    # Plotly draws the first y category at the bottom.
    data = data.iloc[::-1].reset_index(drop=True)
    colors = colors[::-1]

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=[100] * len(data),
            y=data["Category"],
            orientation="h",
            marker=dict(color=TOKENS.track_color),
            hoverinfo="skip",
            showlegend=False,
        )
    )
    fig.add_trace(
        go.Bar(
            x=data["Percent"],
            y=data["Category"],
            orientation="h",
            marker=dict(color=colors),
            customdata=data[["Amount"]],
            text=[f"{currency_symbol}{amount:,.2f}" for amount in data["Amount"]],
            textposition="outside",
            hovertemplate=(
                "%{y}<br>"
                f"Spend: {currency_symbol}%{{customdata[0]:,.2f}}<br>"
                "Share: %{x}%<extra></extra>"
            ),
            name="Share",
            showlegend=False,
        )
    )

    fig.update_layout(
        barmode="overlay",
        bargap=0.45,
        margin=dict(l=0, r=0, t=10, b=0),
        height=max(160, 48 * len(data)),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
        font=dict(color=TOKENS.label_color, family=TOKENS.label_font, size=TOKENS.label_size),
        xaxis=dict(range=[0, 115], visible=False),
        yaxis=dict(showgrid=False, ticks=""),
    )
    return fig
