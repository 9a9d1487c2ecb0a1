"""Tests for showing, listing and re-statusing placed orders."""

from datetime import datetime, timedelta, timezone

import pytest

from dealer_pricing.application.change_order_status import ChangeOrderStatusHandler
from dealer_pricing.application.list_orders import ListOrdersHandler
from dealer_pricing.application.show_order import ShowOrderHandler
from dealer_pricing.domain.exceptions import EntityNotFoundError, ValidationError
from dealer_pricing.domain.model.order import Order, OrderLineSnapshot, OrderStatus
from dealer_pricing.domain.model.product import PartType
from dealer_pricing.domain.model.value_objects import Money
from tests.fakes import FakeOrderRepository

_T0 = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)


def _order(order_id: int, dealer: str = "D1", created_at: datetime = _T0) -> Order:
    line = OrderLineSnapshot(
        product_code="P4",
        description="Part P4",
        part_type=PartType.GENUINE,
        quantity=2,
        unit_price=Money.of("50.00"),
        line_total=Money.of("100.00"),
        band_code="1",
        min_price_applied=False,
    )
    return Order(
        id=order_id,
        order_no=f"ORD-{order_id:06d}",
        dealer_account_id=dealer,
        dealer_user_id="U1",
        lines=[line],
        subtotal=Money.of("100.00"),
        total=Money.of("100.00"),
        created_at=created_at,
    )


def _setup():
    orders = FakeOrderRepository()
    orders.save(_order(1))
    orders.save(_order(2, created_at=_T0 + timedelta(hours=1)))
    orders.save(_order(3, dealer="D2"))
    return orders


class TestShowOrder:

    def test_show(self):
        dto = ShowOrderHandler(_setup()).handle(1)
        assert dto.order_no == "ORD-000001"
        assert dto.total == "£100.00"
        assert dto.created_at == "2026-03-01 09:30 UTC"
        assert dto.lines[0].line_total == "£100.00"

    def test_missing(self):
        with pytest.raises(EntityNotFoundError, match="Order #99 not found"):
            ShowOrderHandler(_setup()).handle(99)


class TestListOrders:

    def test_newest_first_for_dealer(self):
        dtos = ListOrdersHandler(_setup()).handle("D1")
        assert [d.id for d in dtos] == [2, 1]

    def test_no_orders(self):
        assert ListOrdersHandler(_setup()).handle("D9") == []


class TestChangeOrderStatus:

    def test_ship(self):
        orders = _setup()
        ChangeOrderStatusHandler(orders).handle(1, "shipped")
        assert orders.get_by_id(1).status == OrderStatus.SHIPPED

    def test_unknown_status(self):
        with pytest.raises(ValidationError, match="Unknown order status 'LOST'"):
            ChangeOrderStatusHandler(_setup()).handle(1, "LOST")

    def test_invalid_transition(self):
        orders = _setup()
        handler = ChangeOrderStatusHandler(orders)
        handler.handle(1, "CANCELLED")
        with pytest.raises(ValidationError, match="Cannot move order"):
            handler.handle(1, "SHIPPED")
        assert orders.get_by_id(1).status == OrderStatus.CANCELLED

    def test_missing_order(self):
        with pytest.raises(EntityNotFoundError):
            ChangeOrderStatusHandler(_setup()).handle(42, "SHIPPED")

    def test_prices_untouched(self):
        orders = _setup()
        ChangeOrderStatusHandler(orders).handle(1, "SHIPPED")
        assert orders.get_by_id(1).total == Money.of("100.00")
