"""Result components: KPI summary and monthly table."""

from __future__ import annotations

from typing import Any

import pandas as pd
import streamlit as st

from zexasim.ui.helpers import format_pct, format_yen

TABLE_COLUMNS = {
    "label": "時期",
    "active_tiers": "機種",
    "monthly_revenue": "月間収入",
    "balance": "累計収支",
    "profit_rate": "収益率",
}


def build_table_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Display table with formatted yen and percentage columns."""
    table = df[list(TABLE_COLUMNS)].copy()
    table["monthly_revenue"] = table["monthly_revenue"].map(format_yen)
    table["balance"] = table["balance"].map(format_yen)
    table["profit_rate"] = table["profit_rate"].map(format_pct)
    table["active_tiers"] = table["active_tiers"].replace("", "—")
    return table.rename(columns=TABLE_COLUMNS)


def render_projection_table(df: pd.DataFrame) -> None:
    if df is None or df.empty:
        return
    st.dataframe(build_table_frame(df), use_container_width=True, hide_index=True)


def render_kpi_summary(summary: dict[str, Any]) -> None:
    """Headline metrics above the chart."""
    if not summary:
        return

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("累計投資", format_yen(summary["final_investment"]))
    col2.metric("累計収入", format_yen(summary["final_revenue"]))
    col3.metric(
        "収支",
        format_yen(summary["final_balance"]),
        delta=format_pct(summary["final_profit_rate"]),
    )
    col4.metric("黒字化", summary["break_even_label"] or "—")
