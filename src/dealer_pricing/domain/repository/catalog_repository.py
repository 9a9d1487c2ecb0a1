"""Abstract repository for the Product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from dealer_pricing.domain.model.product import Product


class CatalogRepository(ABC):

    @abstractmethod
    def find_product_by_code(self, code: str) -> Product | None:
        """Return a product with its reference and band prices, or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, active or not."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""
