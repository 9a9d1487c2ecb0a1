"""Entitlement visibility rules.

A fixed lookup table from entitlement mode to the part types it may see.
AFTERMARKET_ONLY also grants BRANDED; GENUINE is visible only to
GENUINE_ONLY and SHOW_ALL.
"""

from __future__ import annotations

from typing import Iterable

from dealer_pricing.domain.model.dealer import Entitlement
from dealer_pricing.domain.model.product import PartType, Product

VISIBLE_PART_TYPES: dict[Entitlement, frozenset[PartType]] = {
    Entitlement.GENUINE_ONLY: frozenset({PartType.GENUINE}),
    Entitlement.AFTERMARKET_ONLY: frozenset({PartType.AFTERMARKET, PartType.BRANDED}),
    Entitlement.SHOW_ALL: frozenset(PartType),
}


def can_view(entitlement: Entitlement, part_type: PartType) -> bool:
    return part_type in VISIBLE_PART_TYPES.get(entitlement, frozenset())


def visible_part_types(entitlement: Entitlement) -> list[PartType]:
    """Part types the entitlement can see, in PartType declaration order."""
    visible = VISIBLE_PART_TYPES.get(entitlement, frozenset())
    return [pt for pt in PartType if pt in visible]


def filter_visible(products: Iterable[Product], entitlement: Entitlement) -> list[Product]:
    """Keep active products whose part type the entitlement can see."""
    return [
        p for p in products
        if p.is_active and can_view(entitlement, p.part_type)
    ]
