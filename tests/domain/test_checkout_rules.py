"""Unit tests for CheckoutRules.create_order_snapshot."""

import dataclasses

import pytest

from dealer_pricing.domain.exceptions import NoPriceForBandError, ProductNotFoundError
from dealer_pricing.domain.model.order import Order, OrderStatus
from dealer_pricing.domain.model.product import PartType
from dealer_pricing.domain.model.value_objects import Money
from dealer_pricing.domain.service.checkout_rules import CheckoutRules
from dealer_pricing.domain.service.pricing_service import PricingService
from tests.builders import assign, make_dealer, make_product
from tests.fakes import FakeCatalogRepository, FakeDealerRepository


def _setup():
    catalog = FakeCatalogRepository([
        make_product("P4", PartType.GENUINE, bands={"1": "50.00", "2": "45.00"}),
        make_product("P2", PartType.GENUINE, bands={"1": "90.00"}, minimum="95.00"),
    ])
    dealers = FakeDealerRepository(
        [make_dealer("D1")], [assign("D1", PartType.GENUINE, "1")]
    )
    return CheckoutRules(PricingService(catalog, dealers)), catalog, dealers


class TestCreateOrderSnapshot:

    def test_single_line_snapshot(self):
        checkout, _, _ = _setup()
        draft = checkout.create_order_snapshot("D1", "U1", [("P4", 2)])

        assert draft.dealer_account_id == "D1"
        assert draft.dealer_user_id == "U1"
        assert draft.status == OrderStatus.PROCESSING
        assert draft.subtotal == Money.of("100.00")
        assert draft.total == Money.of("100.00")
        assert len(draft.lines) == 1

        line = draft.lines[0]
        assert line.product_code == "P4"
        assert line.description == "Part P4"
        assert line.quantity == 2
        assert line.unit_price == Money.of("50.00")
        assert line.line_total == Money.of("100.00")
        assert line.band_code == "1"
        assert line.min_price_applied is False

    def test_floor_flag_is_carried_onto_line(self):
        checkout, _, _ = _setup()
        draft = checkout.create_order_snapshot("D1", "U1", [("P2", 1)])
        assert draft.lines[0].unit_price == Money.of("95.00")
        assert draft.lines[0].min_price_applied is True

    def test_total_equals_subtotal(self):
        checkout, _, _ = _setup()
        draft = checkout.create_order_snapshot("D1", "U1", [("P4", 2), ("P2", 3)])
        assert draft.subtotal == Money.of("385.00")
        assert draft.total == draft.subtotal

    def test_unknown_product_propagates(self):
        checkout, _, _ = _setup()
        with pytest.raises(ProductNotFoundError):
            checkout.create_order_snapshot("D1", "U1", [("P4", 1), ("NOPE", 1)])

    def test_setup_gap_propagates(self):
        checkout, catalog, dealers = _setup()
        dealers.save_band_assignment(assign("D1", PartType.GENUINE, "7"))
        with pytest.raises(NoPriceForBandError):
            checkout.create_order_snapshot("D1", "U1", [("P4", 1)])

    def test_empty_items_gives_empty_draft(self):
        checkout, _, _ = _setup()
        draft = checkout.create_order_snapshot("D1", "U1", [])
        assert draft.lines == ()
        assert draft.total == Money.zero()


class TestSnapshotImmutability:

    def test_draft_cannot_be_edited(self):
        checkout, _, _ = _setup()
        draft = checkout.create_order_snapshot("D1", "U1", [("P4", 2)])
        with pytest.raises(dataclasses.FrozenInstanceError):
            draft.total = Money.of("1.00")  # type: ignore[misc]
        with pytest.raises(dataclasses.FrozenInstanceError):
            draft.lines[0].unit_price = Money.of("1.00")  # type: ignore[misc]

    def test_order_keeps_price_after_band_price_changes(self):
        checkout, catalog, _ = _setup()
        order = Order.from_snapshot(
            checkout.create_order_snapshot("D1", "U1", [("P4", 2)]), "ORD-000001"
        )

        catalog.find_product_by_code("P4").set_band_price("1", Money.of("75.00"))

        assert order.lines[0].unit_price == Money.of("50.00")
        assert order.total == Money.of("100.00")
        # A fresh checkout sees the new price.
        fresh = checkout.create_order_snapshot("D1", "U1", [("P4", 2)])
        assert fresh.total == Money.of("150.00")

    def test_order_keeps_band_after_reassignment(self):
        checkout, _, dealers = _setup()
        order = Order.from_snapshot(
            checkout.create_order_snapshot("D1", "U1", [("P4", 2)]), "ORD-000001"
        )

        dealers.save_band_assignment(assign("D1", PartType.GENUINE, "2"))

        assert order.lines[0].band_code == "1"
        assert order.lines[0].unit_price == Money.of("50.00")
