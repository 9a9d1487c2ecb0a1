"""Application service: Check Dealer Setup use case (query).

Every part type a dealer is entitled to view needs a band assignment;
a missing one makes pricing fail with NoBandAssignmentError.  This
reports those gaps before a dealer runs into them.
"""

from __future__ import annotations

from dealer_pricing.domain.exceptions import DealerNotFoundError
from dealer_pricing.domain.model.product import PartType
from dealer_pricing.domain.repository.dealer_repository import DealerRepository
from dealer_pricing.domain.service.entitlement import visible_part_types


class CheckDealerSetupHandler:

    def __init__(self, dealer_repo: DealerRepository) -> None:
        self._dealer_repo = dealer_repo

    def handle(self, dealer_account_id: str) -> list[PartType]:
        """Return visible part types that have no band assignment."""
        dealer = self._dealer_repo.find_dealer_account(dealer_account_id)
        if dealer is None:
            raise DealerNotFoundError(dealer_account_id)

        assigned = {
            a.part_type for a in self._dealer_repo.list_band_assignments(dealer_account_id)
        }
        return [pt for pt in visible_part_types(dealer.entitlement) if pt not in assigned]
