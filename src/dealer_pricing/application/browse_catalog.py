"""Application service: Browse Catalog use case (query).

Lists the active products a dealer is entitled to see.  Unentitled part
types are filtered out before anything reaches the caller, so the
listing never reveals products the dealer could not price.
"""

from __future__ import annotations

from dealer_pricing.application.dto import CatalogEntryDTO
from dealer_pricing.domain.exceptions import DealerNotFoundError
from dealer_pricing.domain.repository.catalog_repository import CatalogRepository
from dealer_pricing.domain.repository.dealer_repository import DealerRepository
from dealer_pricing.domain.service.entitlement import filter_visible


class BrowseCatalogHandler:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        dealer_repo: DealerRepository,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._dealer_repo = dealer_repo

    def handle(self, dealer_account_id: str, search: str | None = None) -> list[CatalogEntryDTO]:
        dealer = self._dealer_repo.find_dealer_account(dealer_account_id)
        if dealer is None:
            raise DealerNotFoundError(dealer_account_id)

        products = filter_visible(self._catalog_repo.list_all(), dealer.entitlement)
        if search:
            needle = search.lower()
            products = [
                p for p in products
                if needle in p.code.lower() or needle in p.description.lower()
            ]

        return [
            CatalogEntryDTO(
                product_code=p.code,
                description=p.description,
                part_type=p.part_type.value,
            )
            for p in sorted(products, key=lambda p: p.code)
        ]
