"""Chart components for visualization."""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

# column -> (legend name, color)
CHART_SERIES = {
    "revenue": ("累計収入", "#4CAF50"),
    "investment": ("累計投資", "#2196F3"),
    "balance": ("収支", "#FF9800"),
}


def build_projection_figure(df: pd.DataFrame) -> go.Figure:
    """Line chart of cumulative revenue, investment and balance per month.

    Args:
        df: Projection DataFrame (see snapshots_to_frame)
    """
    fig = go.Figure()
    for column, (name, color) in CHART_SERIES.items():
        fig.add_trace(go.Scatter(
            x=df["label"],
            y=df[column],
            name=name,
            mode="lines+markers",
            line=dict(color=color, shape="spline"),
            hovertemplate="%{y:,.0f}円<extra>" + name + "</extra>",
        ))

    fig.update_layout(
        xaxis_title="時期",
        yaxis_title="金額 (円)",
        xaxis=dict(tickangle=-45, type="category"),
        yaxis=dict(tickformat=",.0f"),
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        height=420,
    )
    return fig


def render_projection_chart(df: pd.DataFrame, key: str = "projection") -> None:
    """Render the projection chart, or a warning without data."""
    if df is None or df.empty:
        st.warning("シミュレーションデータがありません。")
        return
    st.plotly_chart(build_projection_figure(df), use_container_width=True, key=f"chart_{key}")
