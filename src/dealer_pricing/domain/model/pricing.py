"""Results produced by the pricing engine and cart rules.

Both are frozen: a result is a statement about prices at the moment it
was calculated and is never edited afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from dealer_pricing.domain.model.product import PartType
from dealer_pricing.domain.model.value_objects import Money


@dataclass(frozen=True)
class PriceResult:
    product_id: str
    product_code: str
    description: str
    part_type: PartType
    quantity: int
    band_code: str
    band_price: Money  # raw price for the band, before the floor
    unit_price: Money
    total_price: Money
    min_price_applied: bool
    available: bool = True

    @property
    def currency(self) -> str:
        return self.unit_price.currency


@dataclass(frozen=True)
class CartTotals:
    subtotal: Money
    items: tuple[PriceResult, ...]

    @property
    def currency(self) -> str:
        return self.subtotal.currency
