"""JSON-file-backed implementation of CatalogRepository.

Each product record holds its band prices as a ``{band_code: "amount"}``
object and an optional ``reference_price`` with ``trade_price`` and
``minimum_price``.  Amounts are decimal strings and always GBP; a JSON
number is read through its text form so ``90.1`` stays exactly 90.1.
"""

from __future__ import annotations

from pathlib import Path

from dealer_pricing.domain.model.product import PartType, Product, ReferencePrice
from dealer_pricing.domain.model.value_objects import Money
from dealer_pricing.domain.repository.catalog_repository import CatalogRepository
from dealer_pricing.infrastructure.persistence.json_file import JsonFile, upsert


class JsonCatalogRepository(CatalogRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    # --- CatalogRepository interface ------------------------------------------

    def find_product_by_code(self, code: str) -> Product | None:
        for raw in self._file.read():
            if raw["code"] == code:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._file.read()]

    def save(self, product: Product) -> None:
        records = upsert(
            self._file.read(), self._to_raw(product),
            lambda raw: raw["code"] == product.code,
        )
        self._file.write(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        ref = product.reference_price
        raw = {
            "id": product.id,
            "code": product.code,
            "description": product.description,
            "part_type": product.part_type.value,
            "is_active": product.is_active,
            "reference_price": None,
            "band_prices": {
                band: str(price.amount) for band, price in product.band_prices.items()
            },
        }
        if ref is not None:
            raw["reference_price"] = {
                "trade_price": _amount(ref.trade_price),
                "minimum_price": _amount(ref.minimum_price),
            }
        return raw

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        ref_raw = raw.get("reference_price")
        reference = None
        if ref_raw is not None:
            reference = ReferencePrice(
                trade_price=_money(ref_raw.get("trade_price")),
                minimum_price=_money(ref_raw.get("minimum_price")),
            )
        return Product(
            id=raw["id"],
            code=raw["code"],
            description=raw.get("description", ""),
            part_type=PartType(raw["part_type"]),
            is_active=raw.get("is_active", True),
            reference_price=reference,
            band_prices={
                str(band): _money(price)
                for band, price in raw.get("band_prices", {}).items()
            },
        )


def _money(value: str | int | float | None) -> Money | None:
    # A JSON number arrives as a float; its repr ("90.1") is the exact
    # amount that was written, its binary value is not.
    if value is None:
        return None
    return Money.of(str(value))


def _amount(money: Money | None) -> str | None:
    return None if money is None else str(money.amount)
