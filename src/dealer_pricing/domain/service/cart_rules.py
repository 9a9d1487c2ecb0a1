"""Domain service: cart totals.

Prices every line through the pricing engine and sums the line totals.
The first line that cannot be priced fails the whole calculation; no
line is ever dropped silently.
"""

from __future__ import annotations

from typing import Iterable

from dealer_pricing.domain.model.pricing import CartTotals, PriceResult
from dealer_pricing.domain.model.value_objects import Money
from dealer_pricing.domain.service.pricing_service import PricingService


class CartRules:

    def __init__(self, pricing_service: PricingService) -> None:
        self._pricing = pricing_service

    def calculate_cart_totals(
        self,
        dealer_account_id: str,
        items: Iterable[tuple[str, int]],
    ) -> CartTotals:
        """Price (product_code, qty) lines sequentially.

        ``subtotal`` is the exact sum of each line's ``total_price``.
        """
        subtotal = Money.zero()
        priced: list[PriceResult] = []

        for product_code, qty in items:
            result = self._pricing.calculate_price(dealer_account_id, product_code, qty)
            subtotal = subtotal + result.total_price
            priced.append(result)

        return CartTotals(subtotal=subtotal, items=tuple(priced))
