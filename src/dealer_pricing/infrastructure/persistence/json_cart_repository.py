"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

from pathlib import Path

from dealer_pricing.domain.model.cart import Cart, CartItem
from dealer_pricing.domain.model.value_objects import Quantity
from dealer_pricing.domain.repository.cart_repository import CartRepository
from dealer_pricing.infrastructure.persistence.json_file import JsonFile, upsert


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    def get_for_user(self, dealer_user_id: str) -> Cart | None:
        for raw in self._file.read():
            if raw["dealer_user_id"] == dealer_user_id:
                return Cart(
                    dealer_user_id=raw["dealer_user_id"],
                    dealer_account_id=raw["dealer_account_id"],
                    items=[
                        CartItem(i["product_code"], Quantity(i["quantity"]))
                        for i in raw.get("items", [])
                    ],
                )
        return None

    def save(self, cart: Cart) -> None:
        raw = {
            "dealer_user_id": cart.dealer_user_id,
            "dealer_account_id": cart.dealer_account_id,
            "items": [
                {"product_code": code, "quantity": qty} for code, qty in cart.lines()
            ],
        }
        records = upsert(
            self._file.read(), raw,
            lambda r: r["dealer_user_id"] == cart.dealer_user_id,
        )
        self._file.write(records)
