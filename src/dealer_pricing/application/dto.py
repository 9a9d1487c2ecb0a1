"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money is carried as
a formatted string.
"""

from __future__ import annotations

from dataclasses import dataclass

from dealer_pricing.domain.model.order import Order
from dealer_pricing.domain.model.pricing import PriceResult


@dataclass(frozen=True)
class PriceQuoteDTO:
    product_code: str
    description: str
    part_type: str
    quantity: int
    band_code: str
    unit_price: str  # formatted, e.g. "£95.00"
    total_price: str
    min_price_applied: bool
    currency: str

    @staticmethod
    def from_result(result: PriceResult) -> PriceQuoteDTO:
        return PriceQuoteDTO(
            product_code=result.product_code,
            description=result.description,
            part_type=result.part_type.value,
            quantity=result.quantity,
            band_code=result.band_code,
            unit_price=str(result.unit_price),
            total_price=str(result.total_price),
            min_price_applied=result.min_price_applied,
            currency=result.currency,
        )


@dataclass(frozen=True)
class CatalogEntryDTO:
    product_code: str
    description: str
    part_type: str


@dataclass(frozen=True)
class CartViewDTO:
    dealer_user_id: str
    dealer_account_id: str
    lines: list[PriceQuoteDTO]
    subtotal: str
    currency: str


@dataclass(frozen=True)
class OrderLineDTO:
    product_code: str
    description: str
    quantity: int
    unit_price: str
    line_total: str
    band_code: str
    min_price_applied: bool


@dataclass(frozen=True)
class OrderDTO:
    id: int
    order_no: str
    dealer_account_id: str
    dealer_user_id: str
    status: str
    lines: list[OrderLineDTO]
    subtotal: str
    total: str
    currency: str
    created_at: str
    po_ref: str | None = None
    notes: str | None = None

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            order_no=order.order_no,
            dealer_account_id=order.dealer_account_id,
            dealer_user_id=order.dealer_user_id,
            status=order.status.value,
            lines=[
                OrderLineDTO(
                    product_code=line.product_code,
                    description=line.description,
                    quantity=line.quantity,
                    unit_price=str(line.unit_price),
                    line_total=str(line.line_total),
                    band_code=line.band_code,
                    min_price_applied=line.min_price_applied,
                )
                for line in order.lines
            ],
            subtotal=str(order.subtotal),
            total=str(order.total),
            currency=order.currency,
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
            po_ref=order.po_ref,
            notes=order.notes,
        )
