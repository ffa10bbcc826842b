"""Custom exceptions for zexasim.

Domain-specific exception types for the catalog, planner and projection.
"""

from __future__ import annotations

from typing import Any


class ZexaSimError(Exception):
    """Base exception for all zexasim errors."""
    pass


# --- Catalog Errors ---

class CatalogError(ZexaSimError):
    """The static tier catalog is inconsistent (broken successor chain)."""
    pass


class UnknownTierError(ZexaSimError):
    """A tier identifier is not present in the catalog."""

    def __init__(self, tier_id: Any):
        self.tier_id = tier_id
        super().__init__(f"Unknown tier '{tier_id}'")


# --- Input Errors ---

class InvalidParameterError(ZexaSimError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


class InvalidQuantityError(InvalidParameterError):
    """Quantity outside the accepted unit range."""

    def __init__(self, value: Any, minimum: int = 1, maximum: int = 20):
        self.minimum = minimum
        self.maximum = maximum
        super().__init__("quantity", value, f"must be between {minimum} and {maximum}")


class InvalidDecisionError(ZexaSimError):
    """A decision cannot be recorded or replayed (e.g. upgrade past the last tier)."""
    pass


# --- Calculation Errors ---

class ProjectionError(ZexaSimError):
    """Error during the monthly projection."""
    pass

