"""Application service: Show Cart use case (query).

Prices the cart live through the cart rules.  A cart holding a line
that can no longer be priced raises that line's error; the caller
decides whether to show a partial cart or block checkout.
"""

from __future__ import annotations

from dealer_pricing.application.dto import CartViewDTO, PriceQuoteDTO
from dealer_pricing.domain.exceptions import EntityNotFoundError
from dealer_pricing.domain.repository.cart_repository import CartRepository
from dealer_pricing.domain.service.cart_rules import CartRules


class ShowCartHandler:

    def __init__(self, cart_repo: CartRepository, cart_rules: CartRules) -> None:
        self._cart_repo = cart_repo
        self._cart_rules = cart_rules

    def handle(self, dealer_user_id: str) -> CartViewDTO:
        cart = self._cart_repo.get_for_user(dealer_user_id)
        if cart is None:
            raise EntityNotFoundError(f"No cart for user '{dealer_user_id}'")

        totals = self._cart_rules.calculate_cart_totals(cart.dealer_account_id, cart.lines())
        return CartViewDTO(
            dealer_user_id=cart.dealer_user_id,
            dealer_account_id=cart.dealer_account_id,
            lines=[PriceQuoteDTO.from_result(item) for item in totals.items],
            subtotal=str(totals.subtotal),
            currency=totals.currency,
        )
