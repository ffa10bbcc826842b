"""UI helper functions.

Formatting utilities for yen amounts and percentages.
"""

from __future__ import annotations


def format_yen(value: float | None) -> str:
    """Format an amount like ``1,234,567円``.

    Args:
        value: Amount in yen

    Returns:
        Formatted string, "—" for missing values
    """
    if value is None:
        return "—"
    return f"{int(round(value)):,}円"


def format_pct(value: float | str | None) -> str:
    """Format a percentage like ``12.5%``.

    Strings (already formatted profit rates) are passed through as is.
    """
    if value is None:
        return "—"
    if isinstance(value, str):
        return f"{value}%"
    return f"{value:.1f}%"


def balance_color(value: float) -> str:
    """Green for a non-negative balance, red otherwise."""
    return "#28a745" if value >= 0 else "#dc3545"
