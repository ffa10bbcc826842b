"""Pure calculators: month arithmetic and the revenue projection."""

from .dates import add_months, approximate_month_date, format_month, months_elapsed
from .projection import ProjectionEngine, format_profit_rate, project_revenue

__all__ = [
    "add_months",
    "approximate_month_date",
    "format_month",
    "months_elapsed",
    "ProjectionEngine",
    "format_profit_rate",
    "project_revenue",
]
