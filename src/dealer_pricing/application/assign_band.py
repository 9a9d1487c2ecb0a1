"""Application service: Assign Band use case."""

from __future__ import annotations

from dealer_pricing.domain.exceptions import DealerNotFoundError, ValidationError
from dealer_pricing.domain.model.dealer import DealerBandAssignment
from dealer_pricing.domain.model.product import PartType
from dealer_pricing.domain.repository.dealer_repository import DealerRepository


class AssignBandHandler:

    def __init__(self, dealer_repo: DealerRepository) -> None:
        self._dealer_repo = dealer_repo

    def handle(self, dealer_account_id: str, part_type: str, band_code: str) -> DealerBandAssignment:
        """Set the band a dealer is billed at for one part type.

        Orders already placed keep the band they were priced at.
        """
        if self._dealer_repo.find_dealer_account(dealer_account_id) is None:
            raise DealerNotFoundError(dealer_account_id)
        if not band_code or not band_code.strip():
            raise ValidationError("Band code is required")
        try:
            pt = PartType(part_type.upper())
        except ValueError:
            raise ValidationError(f"Unknown part type '{part_type}'")

        assignment = DealerBandAssignment(
            dealer_account_id=dealer_account_id,
            part_type=pt,
            band_code=band_code.strip(),
        )
        self._dealer_repo.save_band_assignment(assignment)
        return assignment
