"""Domain service: checkout snapshot.

Re-prices the cart at the moment of order placement and freezes the
result into an ``OrderSnapshotDraft``.  Persisting the draft, clearing the
cart and numbering the order belong to the caller.
"""

from __future__ import annotations

from typing import Iterable

from dealer_pricing.domain.model.order import (
    OrderLineSnapshot,
    OrderSnapshotDraft,
    OrderStatus,
)
from dealer_pricing.domain.service.cart_rules import CartRules
from dealer_pricing.domain.service.pricing_service import PricingService

INITIAL_STATUS = OrderStatus.PROCESSING


class CheckoutRules:

    def __init__(self, pricing_service: PricingService) -> None:
        self._cart_rules = CartRules(pricing_service)

    def create_order_snapshot(
        self,
        dealer_account_id: str,
        dealer_user_id: str,
        items: Iterable[tuple[str, int]],
    ) -> OrderSnapshotDraft:
        totals = self._cart_rules.calculate_cart_totals(dealer_account_id, items)

        lines = tuple(
            OrderLineSnapshot(
                product_code=item.product_code,
                description=item.description,
                part_type=item.part_type,
                quantity=item.quantity,
                unit_price=item.unit_price,
                line_total=item.total_price,
                band_code=item.band_code,
                min_price_applied=item.min_price_applied,
            )
            for item in totals.items
        )

        # No tax or shipping: total is the subtotal.
        return OrderSnapshotDraft(
            dealer_account_id=dealer_account_id,
            dealer_user_id=dealer_user_id,
            status=INITIAL_STATUS,
            lines=lines,
            subtotal=totals.subtotal,
            total=totals.subtotal,
        )
