"""Static ZEXABOX product catalog.

Four tiers chained TYPE-D -> TYPE-V -> TYPE-K -> TYPE-X. The chain is
checked once at import so every lookup below can trust it.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from zexasim.core.exceptions import CatalogError, UnknownTierError
from zexasim.domain.models.tier import ProductTier

_TIERS = (
    ProductTier(
        identifier="TYPE-D",
        name="ZEXABOX PRO Type-D",
        price=4_500_000,
        monthly_rental=506_000,
        resale_value=3_847_500,
        resale_percentage=85.5,
        max_profit=130.4,
        rental_months=4,
        limit=140,
        next_tier="TYPE-V",
        description="新規購入可能",
    ),
    ProductTier(
        identifier="TYPE-V",
        name="ZEXABOX PRO Type-V",
        price=3_960_000,
        monthly_rental=440_000,
        resale_value=3_430_000,
        resale_percentage=86.6,
        max_profit=131.0,
        rental_months=4,
        limit=180,
        next_tier="TYPE-K",
        description="TYPE-D所有者向け",
    ),
    ProductTier(
        identifier="TYPE-K",
        name="ZEXABOX PRO Type-K",
        price=3_430_000,
        monthly_rental=350_000,
        resale_value=2_710_000,
        resale_percentage=79.88,
        max_profit=130.0,
        rental_months=4,
        limit=180,
        next_tier="TYPE-X",
        description="TYPE-V所有者向け",
    ),
    ProductTier(
        identifier="TYPE-X",
        name="ZEXABOX PRO Type-X",
        price=2_710_000,
        monthly_rental=275_000,
        resale_value=2_156_000,
        resale_percentage=79.56,
        max_profit=130.0,
        rental_months=5,
        limit=180,
        next_tier=None,
        description="TYPE-K所有者向け",
    ),
)


def validate_chain(tiers: Mapping[str, ProductTier]) -> None:
    """Check that the tiers form one simple chain ending in a terminal tier.

    Raises:
        CatalogError: On dangling successors, cycles, branches or stray tiers.
    """
    if not tiers:
        raise CatalogError("Catalog is empty")

    for key, tier in tiers.items():
        if key != tier.identifier:
            raise CatalogError(f"Catalog key '{key}' does not match tier '{tier.identifier}'")
        if tier.next_tier is not None and tier.next_tier not in tiers:
            raise CatalogError(f"{key} points to unknown successor '{tier.next_tier}'")

    successors = [t.next_tier for t in tiers.values() if t.next_tier is not None]
    if len(successors) != len(set(successors)):
        raise CatalogError("Two tiers share the same successor")

    heads = [key for key in tiers if key not in successors]
    if len(heads) != 1:
        raise CatalogError(f"Expected exactly one entry tier, found {len(heads)}")

    seen: set[str] = set()
    current: str | None = heads[0]
    while current is not None:
        if current in seen:
            raise CatalogError(f"Cycle detected at '{current}'")
        seen.add(current)
        current = tiers[current].next_tier

    if seen != set(tiers):
        raise CatalogError("Some tiers are not reachable from the entry tier")


def _build_catalog() -> Mapping[str, ProductTier]:
    tiers = {tier.identifier: tier for tier in _TIERS}
    validate_chain(tiers)
    return MappingProxyType(tiers)


PRODUCT_TIERS: Mapping[str, ProductTier] = _build_catalog()


def get_tier(tier_id: str, catalog: Mapping[str, ProductTier] = PRODUCT_TIERS) -> ProductTier:
    """Look up a tier by identifier.

    Raises:
        UnknownTierError: If the identifier is not in the catalog.
    """
    try:
        return catalog[tier_id]
    except (KeyError, TypeError):
        raise UnknownTierError(tier_id) from None


def successor_of(tier_id: str, catalog: Mapping[str, ProductTier] = PRODUCT_TIERS) -> ProductTier | None:
    """Return the successor tier, or None for the last tier."""
    tier = get_tier(tier_id, catalog)
    if tier.next_tier is None:
        return None
    return get_tier(tier.next_tier, catalog)


def tier_chain(start: str, catalog: Mapping[str, ProductTier] = PRODUCT_TIERS) -> list[ProductTier]:
    """Tiers from ``start`` up to and including the terminal tier."""
    chain = [get_tier(start, catalog)]
    while chain[-1].next_tier is not None:
        chain.append(get_tier(chain[-1].next_tier, catalog))
    return chain


def entry_tier(catalog: Mapping[str, ProductTier] = PRODUCT_TIERS) -> ProductTier:
    """The only tier that is nobody's successor."""
    successors = {t.next_tier for t in catalog.values()}
    return next(t for t in catalog.values() if t.identifier not in successors)


def tier_ids(catalog: Mapping[str, ProductTier] = PRODUCT_TIERS) -> list[str]:
    """Catalog keys in chain order, for selectors."""
    return [t.identifier for t in tier_chain(entry_tier(catalog).identifier, catalog)]
