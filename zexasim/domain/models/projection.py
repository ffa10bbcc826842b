"""Projection input and output models.

``ProjectionInputs`` is the immutable bundle of everything the engine
needs; ``ProjectionSnapshot`` is one month of computed output.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from zexasim.core.exceptions import InvalidQuantityError
from zexasim.core.settings import MonthMode
from zexasim.domain.models.decision import Decision


class ProjectionInputs(BaseModel):
    """Immutable inputs of one projection run."""

    start_date: date
    start_tier: str = Field(..., description="Tier of the initial lot")
    quantity: int = Field(..., description="Units bought, carried through upgrades")
    decisions: tuple[Decision, ...] = Field(default=(), description="Ordered decision history")

    horizon_months: int = Field(default=24, ge=1, description="Last month index simulated")
    rental_lag_months: int = Field(default=2, ge=0, description="Ramp-up months without rental")
    month_mode: MonthMode = Field(default="fixed_30_day")
    min_quantity: int = Field(default=1, ge=1, description="Smallest accepted quantity")
    max_quantity: int = Field(default=20, ge=1, description="Largest accepted quantity")

    model_config = {
        "frozen": True,
    }

    @field_validator("quantity", mode="before")
    @classmethod
    def validate_quantity_type(cls, v: Any) -> Any:
        """Reject booleans and non-integer quantities."""
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidQuantityError(v)
        return v

    @model_validator(mode="after")
    def check_quantity_range(self) -> "ProjectionInputs":
        """Quantity must fall within this run's unit bounds."""
        if not self.min_quantity <= self.quantity <= self.max_quantity:
            raise InvalidQuantityError(self.quantity, self.min_quantity, self.max_quantity)
        return self

    @property
    def month_count(self) -> int:
        """Number of snapshots produced (months 0..horizon inclusive)."""
        return self.horizon_months + 1


class ProjectionSnapshot(BaseModel):
    """Financial state at the end of one simulated month."""

    label: str = Field(..., description="Calendar label YYYY/MM")
    month_index: int = Field(..., ge=0, description="0-based month offset from start")
    month_number: int = Field(..., ge=1, description="1-based month number shown to users")
    active_tiers: str = Field(default="", description="Comma-joined names of active lots")

    investment: int = Field(..., description="Cumulative investment in ¥")
    revenue: int = Field(..., description="Cumulative revenue in ¥")
    balance: int = Field(..., description="Revenue minus investment in ¥")
    monthly_revenue: int = Field(..., description="Rental income accrued this month in ¥")
    profit_rate: str = Field(..., description="(revenue / investment - 1) x 100, one decimal")

    model_config = {
        "frozen": True,
    }

    @property
    def has_active_lot(self) -> bool:
        return bool(self.active_tiers)
