"""Application service: Change Order Status use case.

Administrative transitions only.  Prices and lines on the order are
never touched here.
"""

from __future__ import annotations

import logging

from dealer_pricing.domain.exceptions import EntityNotFoundError, ValidationError
from dealer_pricing.domain.model.order import OrderStatus
from dealer_pricing.domain.repository.order_repository import OrderRepository

log = logging.getLogger(__name__)


class ChangeOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, new_status: str) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        try:
            status = OrderStatus(new_status.upper())
        except ValueError:
            raise ValidationError(f"Unknown order status '{new_status}'")

        previous = order.status
        order.change_status(status)
        self._order_repo.save(order)
        log.info(
            "Order %s moved from %s to %s",
            order.order_no, previous.value, status.value,
        )
