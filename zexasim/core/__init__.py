"""Core infrastructure: exceptions, logging and settings."""

from .exceptions import (
    CatalogError,
    InvalidDecisionError,
    InvalidParameterError,
    InvalidQuantityError,
    ProjectionError,
    UnknownTierError,
    ZexaSimError,
)
from .settings import AppSettings, get_settings

__all__ = [
    "AppSettings",
    "get_settings",
    # Exceptions
    "ZexaSimError",
    "CatalogError",
    "UnknownTierError",
    "InvalidParameterError",
    "InvalidQuantityError",
    "InvalidDecisionError",
    "ProjectionError",
]
