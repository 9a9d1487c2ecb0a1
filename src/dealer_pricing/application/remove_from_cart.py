"""Application service: Remove From Cart use case."""

from __future__ import annotations

from dealer_pricing.domain.exceptions import EntityNotFoundError
from dealer_pricing.domain.model.cart import Cart
from dealer_pricing.domain.repository.cart_repository import CartRepository


class RemoveFromCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, dealer_user_id: str, product_code: str) -> Cart:
        cart = self._cart_repo.get_for_user(dealer_user_id)
        if cart is None:
            raise EntityNotFoundError(f"No cart for user '{dealer_user_id}'")

        cart.remove_item(product_code)
        self._cart_repo.save(cart)
        return cart
