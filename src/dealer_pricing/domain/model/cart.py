"""Cart aggregate, a dealer user's working set before checkout.

The cart stores product codes and quantities only.  Prices are never
kept on the cart; they are recalculated by the cart rules every time the
cart is shown and frozen only when an order is placed.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dealer_pricing.domain.exceptions import ValidationError
from dealer_pricing.domain.model.value_objects import MAX_QUANTITY, Quantity


@dataclass
class CartItem:
    product_code: str
    quantity: Quantity


@dataclass
class Cart:
    """One cart per dealer user, billed to the user's dealer account."""

    dealer_user_id: str
    dealer_account_id: str
    items: list[CartItem] = field(default_factory=list)

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product_code: str, quantity: int) -> None:
        """Add *quantity* of a product, merging with an existing line."""
        added = Quantity(quantity)
        existing = self._find_item(product_code)
        if existing is None:
            self.items.append(CartItem(product_code, added))
            return

        merged = existing.quantity.value + added.value
        if merged > MAX_QUANTITY:
            raise ValidationError(
                f"Cannot hold more than {MAX_QUANTITY} of {product_code} "
                f"(already {existing.quantity.value} in cart)"
            )
        existing.quantity = Quantity(merged)

    def update_item(self, product_code: str, quantity: int) -> None:
        item = self._require_item(product_code)
        item.quantity = Quantity(quantity)

    def remove_item(self, product_code: str) -> None:
        item = self._require_item(product_code)
        self.items.remove(item)

    def clear(self) -> None:
        self.items.clear()

    # --- Queries --------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.items

    def lines(self) -> list[tuple[str, int]]:
        """Return (product_code, qty) pairs in the order they were added."""
        return [(item.product_code, item.quantity.value) for item in self.items]

    # --- Internal helpers -----------------------------------------------------

    def _find_item(self, product_code: str) -> CartItem | None:
        for item in self.items:
            if item.product_code == product_code:
                return item
        return None

    def _require_item(self, product_code: str) -> CartItem:
        item = self._find_item(product_code)
        if item is None:
            raise ValidationError(f"Product '{product_code}' is not in the cart")
        return item
