"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

The data directory defaults to ``<project root>/data`` and can be moved
with the ``DEALER_PRICING_DATA_DIR`` environment variable.  It is read on
every call so tests and the CLI can switch it at runtime.
"""

from __future__ import annotations

import os
from pathlib import Path

from dealer_pricing.domain.service.cart_rules import CartRules
from dealer_pricing.domain.service.checkout_rules import CheckoutRules
from dealer_pricing.domain.service.pricing_service import PricingService
from dealer_pricing.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from dealer_pricing.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)
from dealer_pricing.infrastructure.persistence.json_dealer_repository import (
    JsonDealerRepository,
)
from dealer_pricing.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)

DATA_DIR_ENV = "DEALER_PRICING_DATA_DIR"

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.getenv(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def catalog_repository() -> JsonCatalogRepository:
    return JsonCatalogRepository(data_dir() / "catalog.json")


def dealer_repository() -> JsonDealerRepository:
    return JsonDealerRepository(data_dir() / "dealers.json")


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(data_dir() / "carts.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(data_dir() / "orders.json")


def pricing_service() -> PricingService:
    return PricingService(catalog_repository(), dealer_repository())


def cart_rules() -> CartRules:
    return CartRules(pricing_service())


def checkout_rules() -> CheckoutRules:
    return CheckoutRules(pricing_service())
