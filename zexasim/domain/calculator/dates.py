"""Month arithmetic used by the projection.

Two ways of counting months since purchase are supported:

- ``fixed_30_day``: floor of the day difference divided by 30. This is an
  approximation that drifts from calendar months over long spans.
- ``calendar``: whole calendar months between the two dates.
"""

from __future__ import annotations

from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from zexasim.core.exceptions import InvalidParameterError

MONTH_UNIT = timedelta(days=30)


def add_months(start: date, months: int) -> date:
    """Calendar date ``months`` whole months after ``start``.

    Days past the end of a shorter month clamp to its last day
    (2024-01-31 + 1 month -> 2024-02-29).
    """
    return start + relativedelta(months=months)


def months_elapsed(purchase: date, current: date, mode: str = "fixed_30_day") -> int:
    """Whole months between ``purchase`` and ``current``.

    Args:
        purchase: Lot purchase date
        current: Date of the evaluated month
        mode: "fixed_30_day" or "calendar"

    Returns:
        Months elapsed (negative if ``current`` precedes ``purchase``)
    """
    if mode == "fixed_30_day":
        return (current - purchase) // MONTH_UNIT
    if mode == "calendar":
        delta = relativedelta(current, purchase)
        return delta.years * 12 + delta.months
    raise InvalidParameterError("month_mode", mode, "expected 'fixed_30_day' or 'calendar'")


def approximate_month_date(start: date, months: int) -> date:
    """``start`` shifted by ``months`` fixed 30-day units (history labels)."""
    return start + months * MONTH_UNIT


def format_month(d: date) -> str:
    """Calendar label like ``2024/04``."""
    return f"{d.year}/{d.month:02d}"
