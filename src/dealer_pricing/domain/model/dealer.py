"""Dealer account and its per-part-type band assignments."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dealer_pricing.domain.model.product import PartType


class Entitlement(Enum):
    GENUINE_ONLY = "GENUINE_ONLY"
    AFTERMARKET_ONLY = "AFTERMARKET_ONLY"
    SHOW_ALL = "SHOW_ALL"


class DealerStatus(Enum):
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    INACTIVE = "INACTIVE"


@dataclass
class DealerAccount:
    """A trading account.

    ``entitlement`` is the only gate on which part types the dealer sees.
    ``status`` governs whether the dealer may place orders.
    """

    id: str
    account_no: str
    company_name: str
    entitlement: Entitlement = Entitlement.SHOW_ALL
    status: DealerStatus = DealerStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == DealerStatus.ACTIVE


@dataclass(frozen=True)
class DealerBandAssignment:
    """The discount band a dealer is billed at for one part type."""

    dealer_account_id: str
    part_type: PartType
    band_code: str
