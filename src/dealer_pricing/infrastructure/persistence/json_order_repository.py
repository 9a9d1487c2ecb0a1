"""JSON-file-backed implementation of OrderRepository.

Orders are written once at checkout and afterwards only re-saved for
status changes, so every line keeps the prices it was placed at.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from dealer_pricing.domain.model.order import Order, OrderLineSnapshot, OrderStatus
from dealer_pricing.domain.model.product import PartType
from dealer_pricing.domain.model.value_objects import DEFAULT_CURRENCY, Money
from dealer_pricing.domain.repository.order_repository import OrderRepository
from dealer_pricing.infrastructure.persistence.json_file import JsonFile, upsert


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        return max((raw["id"] for raw in self._file.read()), default=0) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        match = next((raw for raw in self._file.read() if raw["id"] == order_id), None)
        return None if match is None else _order_from_raw(match)

    def list_for_dealer(self, dealer_account_id: str) -> list[Order]:
        return [
            _order_from_raw(raw)
            for raw in self._file.read()
            if raw["dealer_account_id"] == dealer_account_id
        ]

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self.next_id()
        records = upsert(
            self._file.read(), _order_to_raw(order), lambda raw: raw["id"] == order.id
        )
        self._file.write(records)


# --- Serialization ------------------------------------------------------------


def _order_to_raw(order: Order) -> dict:
    return {
        "id": order.id,
        "order_no": order.order_no,
        "dealer_account_id": order.dealer_account_id,
        "dealer_user_id": order.dealer_user_id,
        "status": order.status.value,
        "currency": order.currency,
        "subtotal": str(order.subtotal.amount),
        "total": str(order.total.amount),
        "po_ref": order.po_ref,
        "notes": order.notes,
        "created_at": order.created_at.isoformat(),
        "lines": [_line_to_raw(line) for line in order.lines],
    }


def _line_to_raw(line: OrderLineSnapshot) -> dict:
    return {
        "product_code": line.product_code,
        "description": line.description,
        "part_type": line.part_type.value,
        "quantity": line.quantity,
        "unit_price": str(line.unit_price.amount),
        "line_total": str(line.line_total.amount),
        "band_code": line.band_code,
        "min_price_applied": line.min_price_applied,
    }


def _order_from_raw(raw: dict) -> Order:
    currency = raw.get("currency", DEFAULT_CURRENCY)

    def money(value: str) -> Money:
        return Money.of(str(value), currency)

    return Order(
        id=raw["id"],
        order_no=raw["order_no"],
        dealer_account_id=raw["dealer_account_id"],
        dealer_user_id=raw["dealer_user_id"],
        lines=[
            OrderLineSnapshot(
                product_code=line["product_code"],
                description=line["description"],
                part_type=PartType(line["part_type"]),
                quantity=line["quantity"],
                unit_price=money(line["unit_price"]),
                line_total=money(line["line_total"]),
                band_code=line["band_code"],
                min_price_applied=line["min_price_applied"],
            )
            for line in raw["lines"]
        ],
        subtotal=money(raw["subtotal"]),
        total=money(raw["total"]),
        status=OrderStatus(raw["status"]),
        po_ref=raw.get("po_ref"),
        notes=raw.get("notes"),
        created_at=datetime.fromisoformat(raw["created_at"]),
    )
