"""Tests for dealer band setup: assigning bands and reporting gaps."""

import pytest

from dealer_pricing.application.assign_band import AssignBandHandler
from dealer_pricing.application.check_dealer_setup import CheckDealerSetupHandler
from dealer_pricing.domain.exceptions import DealerNotFoundError, ValidationError
from dealer_pricing.domain.model.dealer import Entitlement
from dealer_pricing.domain.model.product import PartType
from tests.builders import assign, make_dealer
from tests.fakes import FakeDealerRepository


def _setup():
    dealers = FakeDealerRepository(
        [
            make_dealer("DS", Entitlement.SHOW_ALL),
            make_dealer("DA", Entitlement.AFTERMARKET_ONLY),
        ],
        [assign("DS", PartType.GENUINE, "2")],
    )
    return AssignBandHandler(dealers), CheckDealerSetupHandler(dealers), dealers


class TestCheckDealerSetup:

    def test_reports_missing_visible_types(self):
        _, check, _ = _setup()
        assert check.handle("DS") == [PartType.AFTERMARKET, PartType.BRANDED]

    def test_only_visible_types_reported(self):
        _, check, _ = _setup()
        assert check.handle("DA") == [PartType.AFTERMARKET, PartType.BRANDED]

    def test_complete_setup(self):
        assign_band, check, _ = _setup()
        assign_band.handle("DA", "AFTERMARKET", "1")
        assign_band.handle("DA", "BRANDED", "3")
        assert check.handle("DA") == []

    def test_unknown_dealer(self):
        _, check, _ = _setup()
        with pytest.raises(DealerNotFoundError):
            check.handle("GHOST")


class TestAssignBand:

    def test_creates_assignment(self):
        assign_band, _, dealers = _setup()
        result = assign_band.handle("DA", "aftermarket", " 4 ")

        assert result.part_type == PartType.AFTERMARKET
        assert result.band_code == "4"
        assert dealers.find_band_assignment("DA", PartType.AFTERMARKET) == result

    def test_replaces_existing_assignment(self):
        assign_band, _, dealers = _setup()
        assign_band.handle("DS", "GENUINE", "5")

        assert dealers.find_band_assignment("DS", PartType.GENUINE).band_code == "5"
        assert len(dealers.list_band_assignments("DS")) == 1

    def test_unknown_part_type(self):
        assign_band, _, _ = _setup()
        with pytest.raises(ValidationError, match="Unknown part type 'OEM'"):
            assign_band.handle("DS", "OEM", "1")

    def test_blank_band(self):
        assign_band, _, _ = _setup()
        with pytest.raises(ValidationError, match="Band code is required"):
            assign_band.handle("DS", "GENUINE", "  ")

    def test_unknown_dealer(self):
        assign_band, _, _ = _setup()
        with pytest.raises(DealerNotFoundError):
            assign_band.handle("GHOST", "GENUINE", "1")
