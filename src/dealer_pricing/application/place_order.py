"""Application service: Place Order use case.

Orchestrates checkout:

1. The dealer must exist and be ACTIVE.
2. The user's cart must hold at least one line.
3. Checkout rules re-price every line and freeze the result.
4. The snapshot becomes an Order with a generated order number.
5. The order is saved, then the cart is cleared.

Any line that cannot be priced aborts the whole checkout with that
line's error, before anything is written.
"""

from __future__ import annotations

import logging

from dealer_pricing.application.dto import OrderDTO
from dealer_pricing.domain.exceptions import (
    DealerInactiveError,
    DealerNotFoundError,
    ValidationError,
)
from dealer_pricing.domain.model.order import Order
from dealer_pricing.domain.repository.cart_repository import CartRepository
from dealer_pricing.domain.repository.dealer_repository import DealerRepository
from dealer_pricing.domain.repository.order_repository import OrderRepository
from dealer_pricing.domain.service.checkout_rules import CheckoutRules

log = logging.getLogger(__name__)


def format_order_no(order_id: int) -> str:
    return f"ORD-{order_id:06d}"


class PlaceOrderHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        order_repo: OrderRepository,
        dealer_repo: DealerRepository,
        checkout_rules: CheckoutRules,
    ) -> None:
        self._cart_repo = cart_repo
        self._order_repo = order_repo
        self._dealer_repo = dealer_repo
        self._checkout_rules = checkout_rules

    def handle(
        self,
        dealer_user_id: str,
        po_ref: str | None = None,
        notes: str | None = None,
    ) -> OrderDTO:
        cart = self._cart_repo.get_for_user(dealer_user_id)
        if cart is None or cart.is_empty:
            raise ValidationError("Cart is empty")

        dealer = self._dealer_repo.find_dealer_account(cart.dealer_account_id)
        if dealer is None:
            raise DealerNotFoundError(cart.dealer_account_id)
        if not dealer.is_active:
            raise DealerInactiveError(dealer.id, dealer.status.value)

        draft = self._checkout_rules.create_order_snapshot(
            cart.dealer_account_id, dealer_user_id, cart.lines()
        )

        order_id = self._order_repo.next_id()
        order = Order.from_snapshot(
            draft, order_no=format_order_no(order_id), po_ref=po_ref, notes=notes
        )
        order.id = order_id

        # Order first: a failure after this point leaves a placed order and
        # a stale cart, never a cleared cart with no order.
        self._order_repo.save(order)
        cart.clear()
        self._cart_repo.save(cart)

        log.info(
            "Order %s placed for dealer %s: %d line(s), total %s",
            order.order_no, order.dealer_account_id, len(order.lines), order.total,
        )
        return OrderDTO.from_order(order)
