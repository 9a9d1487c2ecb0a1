"""Product aggregate.

Products are owned by the catalog.  Import pipelines create and update
them; the pricing engine only ever reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from dealer_pricing.domain.model.value_objects import Money


class PartType(Enum):
    GENUINE = "GENUINE"
    AFTERMARKET = "AFTERMARKET"
    BRANDED = "BRANDED"


@dataclass(frozen=True)
class ReferencePrice:
    """Per-product reference pricing.

    ``trade_price`` is informational.  ``minimum_price`` is the hard floor:
    the lowest amount a dealer may be charged whatever their band.
    """

    trade_price: Money | None = None
    minimum_price: Money | None = None


@dataclass
class Product:
    """A part in the catalog.

    ``band_prices`` maps an opaque band code (e.g. ``"1"``..``"7"``) to the
    price billed at that band.  A missing key means no price exists for
    that band.
    """

    id: str
    code: str
    description: str
    part_type: PartType
    is_active: bool = True
    reference_price: ReferencePrice | None = None
    band_prices: dict[str, Money] = field(default_factory=dict)

    def price_for_band(self, band_code: str) -> Money | None:
        return self.band_prices.get(band_code)

    @property
    def minimum_price(self) -> Money | None:
        if self.reference_price is None:
            return None
        return self.reference_price.minimum_price

    def set_band_price(self, band_code: str, price: Money) -> None:
        """Replace the price for one band.

        Orders already placed keep the price they captured at checkout.
        """
        self.band_prices[band_code] = price
