"""Domain service: dealer pricing.

Resolves the price a dealer pays for a product by composing three
pieces of data:

  1. the dealer's entitlement (may they see this part type at all?)
  2. the dealer's band assignment for the product's part type
  3. the product's band price, floored at its minimum price

Each lookup short-circuits to its own exception type so callers can tell
"does not exist" from "not entitled" from "setup gap".  The service
reads through the repository ports and never writes.
"""

from __future__ import annotations

import logging

from dealer_pricing.domain.exceptions import (
    DealerNotFoundError,
    NoBandAssignmentError,
    NoPriceForBandError,
    ProductInactiveError,
    ProductNotAvailableError,
    ProductNotFoundError,
)
from dealer_pricing.domain.model.dealer import DealerAccount
from dealer_pricing.domain.model.pricing import PriceResult
from dealer_pricing.domain.model.product import PartType
from dealer_pricing.domain.model.value_objects import Quantity
from dealer_pricing.domain.repository.catalog_repository import CatalogRepository
from dealer_pricing.domain.repository.dealer_repository import DealerRepository
from dealer_pricing.domain.service.entitlement import can_view

log = logging.getLogger(__name__)


class PricingService:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        dealer_repo: DealerRepository,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._dealer_repo = dealer_repo

    def can_dealer_view_product(self, dealer_account_id: str, part_type: PartType) -> bool:
        """Entitlement check on its own, for search and listing filters."""
        dealer = self._require_dealer(dealer_account_id)
        return can_view(dealer.entitlement, part_type)

    def calculate_price(
        self,
        dealer_account_id: str,
        product_code: str,
        qty: int = 1,
    ) -> PriceResult:
        quantity = Quantity(qty)

        product = self._catalog_repo.find_product_by_code(product_code)
        if product is None:
            raise ProductNotFoundError(product_code)
        if not product.is_active:
            raise ProductInactiveError(product_code)

        if not self.can_dealer_view_product(dealer_account_id, product.part_type):
            log.debug(
                "Dealer %s not entitled to %s (%s)",
                dealer_account_id, product_code, product.part_type.value,
            )
            raise ProductNotAvailableError(product_code, product.part_type.value)

        assignment = self._dealer_repo.find_band_assignment(
            dealer_account_id, product.part_type
        )
        if assignment is None:
            log.warning(
                "Dealer %s has no band assignment for %s",
                dealer_account_id, product.part_type.value,
            )
            raise NoBandAssignmentError(dealer_account_id, product.part_type.value)

        band_price = product.price_for_band(assignment.band_code)
        if band_price is None:
            log.warning(
                "Product %s has no price for band %s",
                product_code, assignment.band_code,
            )
            raise NoPriceForBandError(product_code, assignment.band_code)

        unit_price = band_price
        min_price_applied = False
        minimum = product.minimum_price
        if minimum is not None and band_price < minimum:
            unit_price = minimum
            min_price_applied = True
            log.debug(
                "Floor applied to %s: band %s price %s raised to %s",
                product_code, assignment.band_code, band_price, minimum,
            )

        result = PriceResult(
            product_id=product.id,
            product_code=product.code,
            description=product.description,
            part_type=product.part_type,
            quantity=quantity.value,
            band_code=assignment.band_code,
            band_price=band_price,
            unit_price=unit_price,
            total_price=unit_price * quantity.value,
            min_price_applied=min_price_applied,
        )
        log.debug(
            "Priced %s x%d for dealer %s at %s",
            product_code, quantity.value, dealer_account_id, unit_price,
        )
        return result

    # --- Internal helpers -----------------------------------------------------

    def _require_dealer(self, dealer_account_id: str) -> DealerAccount:
        dealer = self._dealer_repo.find_dealer_account(dealer_account_id)
        if dealer is None:
            raise DealerNotFoundError(dealer_account_id)
        return dealer
