"""Application service: List Orders use case (query)."""

from __future__ import annotations

from dealer_pricing.application.dto import OrderDTO
from dealer_pricing.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, dealer_account_id: str) -> list[OrderDTO]:
        """Return the dealer's orders, newest first."""
        orders = self._order_repo.list_for_dealer(dealer_account_id)
        orders.sort(key=lambda o: (o.created_at, o.id or 0), reverse=True)
        return [OrderDTO.from_order(o) for o in orders]
