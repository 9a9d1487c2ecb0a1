"""Tests for the price quote and catalog browse queries."""

import pytest

from dealer_pricing.application.browse_catalog import BrowseCatalogHandler
from dealer_pricing.application.quote_price import QuotePriceHandler
from dealer_pricing.domain.exceptions import DealerNotFoundError, ProductNotAvailableError
from dealer_pricing.domain.model.dealer import Entitlement
from dealer_pricing.domain.model.product import PartType
from dealer_pricing.domain.service.pricing_service import PricingService
from tests.builders import assign, make_dealer, make_product
from tests.fakes import FakeCatalogRepository, FakeDealerRepository


def _setup():
    catalog = FakeCatalogRepository([
        make_product("GEN-2", PartType.GENUINE, bands={"2": "90.00"}, minimum="95.00",
                     description="Brake pad set"),
        make_product("GEN-1", PartType.GENUINE, bands={"2": "12.00"}, description="Oil filter"),
        make_product("AFT-1", PartType.AFTERMARKET, bands={"1": "9.50"}, description="Oil filter"),
        make_product("BRD-1", PartType.BRANDED, bands={"1": "18.00"}, description="Wiper blade"),
        make_product("GEN-9", PartType.GENUINE, active=False),
    ])
    dealers = FakeDealerRepository(
        [
            make_dealer("DG", Entitlement.GENUINE_ONLY),
            make_dealer("DA", Entitlement.AFTERMARKET_ONLY),
        ],
        [assign("DG", PartType.GENUINE, "2")],
    )
    return (
        QuotePriceHandler(PricingService(catalog, dealers)),
        BrowseCatalogHandler(catalog, dealers),
    )


class TestQuotePrice:

    def test_quote_formats_money(self):
        quote, _ = _setup()
        dto = quote.handle("DG", "GEN-2", 3)

        assert dto.product_code == "GEN-2"
        assert dto.description == "Brake pad set"
        assert dto.part_type == "GENUINE"
        assert dto.quantity == 3
        assert dto.band_code == "2"
        assert dto.unit_price == "£95.00"
        assert dto.total_price == "£285.00"
        assert dto.min_price_applied is True
        assert dto.currency == "GBP"

    def test_quote_errors_propagate(self):
        quote, _ = _setup()
        with pytest.raises(ProductNotAvailableError):
            quote.handle("DG", "AFT-1")


class TestBrowseCatalog:

    def test_lists_only_entitled_active_products_sorted(self):
        _, browse = _setup()
        entries = browse.handle("DG")
        assert [e.product_code for e in entries] == ["GEN-1", "GEN-2"]

    def test_aftermarket_only_sees_branded(self):
        _, browse = _setup()
        entries = browse.handle("DA")
        assert [(e.product_code, e.part_type) for e in entries] == [
            ("AFT-1", "AFTERMARKET"),
            ("BRD-1", "BRANDED"),
        ]

    def test_search_matches_code_or_description(self):
        _, browse = _setup()
        assert [e.product_code for e in browse.handle("DG", search="oil")] == ["GEN-1"]
        assert [e.product_code for e in browse.handle("DG", search="gen-2")] == ["GEN-2"]

    def test_search_never_reveals_unentitled(self):
        _, browse = _setup()
        assert browse.handle("DA", search="brake") == []

    def test_unknown_dealer(self):
        _, browse = _setup()
        with pytest.raises(DealerNotFoundError):
            browse.handle("GHOST")
