"""Application settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from datetime import date
from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

MonthMode = Literal["fixed_30_day", "calendar"]


class AppSettings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON lines")

    # Feature flags
    debug_mode: bool = Field(default=False, description="Show raw snapshot data in the UI")

    # Projection
    horizon_months: int = Field(default=24, ge=1, le=120)
    rental_lag_months: int = Field(default=2, ge=0, description="Months before rental income starts")
    month_mode: MonthMode = Field(
        default="fixed_30_day",
        description="How months elapsed since purchase are counted",
    )

    # Decision cadence
    first_decision_month: int = Field(default=4, ge=0)
    decision_interval_months: int = Field(default=4, ge=1)

    # Inputs
    min_quantity: int = Field(default=1, ge=1)
    max_quantity: int = Field(default=20, ge=1)
    default_quantity: int = Field(default=1, ge=1)
    default_start_date: date = Field(default=date(2024, 4, 1))
    default_tier: str = Field(default="TYPE-D")

    model_config = {
        "env_prefix": "ZEXASIM_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @model_validator(mode="after")
    def check_quantity_bounds(self) -> AppSettings:
        """Default quantity must sit inside [min_quantity, max_quantity]."""
        if self.min_quantity > self.max_quantity:
            raise ValueError("min_quantity must not exceed max_quantity")
        if not self.min_quantity <= self.default_quantity <= self.max_quantity:
            raise ValueError("default_quantity must be within [min_quantity, max_quantity]")
        return self


@lru_cache
def get_settings() -> AppSettings:
    """Get cached application settings."""
    return AppSettings()
