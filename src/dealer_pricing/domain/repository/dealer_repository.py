"""Abstract repository for dealer accounts and band assignments."""

from __future__ import annotations

from abc import ABC, abstractmethod

from dealer_pricing.domain.model.dealer import DealerAccount, DealerBandAssignment
from dealer_pricing.domain.model.product import PartType


class DealerRepository(ABC):

    @abstractmethod
    def find_dealer_account(self, dealer_account_id: str) -> DealerAccount | None:
        """Return a dealer account by ID, or None if not found."""

    @abstractmethod
    def find_band_assignment(
        self, dealer_account_id: str, part_type: PartType
    ) -> DealerBandAssignment | None:
        """Return the dealer's band for a part type, or None."""

    @abstractmethod
    def list_band_assignments(self, dealer_account_id: str) -> list[DealerBandAssignment]:
        """Return every band assignment held by a dealer."""

    @abstractmethod
    def save_account(self, account: DealerAccount) -> None:
        """Persist a new or updated dealer account."""

    @abstractmethod
    def save_band_assignment(self, assignment: DealerBandAssignment) -> None:
        """Create or replace the assignment for (dealer, part type)."""
