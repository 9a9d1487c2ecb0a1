"""Order aggregate: the persisted form of a checkout snapshot.

An order is created exactly once, from an ``OrderSnapshotDraft``.  Every
line value is a copy taken at checkout; nothing on an order points back
at the catalog or the dealer's band assignments.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from dealer_pricing.domain.exceptions import ValidationError
from dealer_pricing.domain.model.product import PartType
from dealer_pricing.domain.model.value_objects import Money


class OrderStatus(Enum):
    SUSPENDED = "SUSPENDED"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    CANCELLED = "CANCELLED"


_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.SUSPENDED: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


def is_valid_transition(current: OrderStatus, new: OrderStatus) -> bool:
    return new in _TRANSITIONS[current]


@dataclass(frozen=True)
class OrderLineSnapshot:
    """One priced line, frozen at checkout time."""

    product_code: str
    description: str
    part_type: PartType
    quantity: int
    unit_price: Money
    line_total: Money
    band_code: str
    min_price_applied: bool


@dataclass(frozen=True)
class OrderSnapshotDraft:
    """What checkout hands to the caller for persisting.

    A plain value: the caller turns it into an ``Order`` and owns it from
    then on.
    """

    dealer_account_id: str
    dealer_user_id: str
    status: OrderStatus
    lines: tuple[OrderLineSnapshot, ...]
    subtotal: Money
    total: Money

    @property
    def currency(self) -> str:
        return self.total.currency


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use ``Order.from_snapshot()`` for new orders.  The ``__init__`` is kept
    simple so the repository can reconstitute persisted orders.
    """

    id: int | None
    order_no: str
    dealer_account_id: str
    dealer_user_id: str
    lines: list[OrderLineSnapshot]
    subtotal: Money
    total: Money
    status: OrderStatus = OrderStatus.PROCESSING
    po_ref: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def from_snapshot(
        draft: OrderSnapshotDraft,
        order_no: str,
        po_ref: str | None = None,
        notes: str | None = None,
    ) -> Order:
        if not draft.lines:
            raise ValidationError("Order must contain at least one line")
        return Order(
            id=None,
            order_no=order_no,
            dealer_account_id=draft.dealer_account_id,
            dealer_user_id=draft.dealer_user_id,
            lines=list(draft.lines),
            subtotal=draft.subtotal,
            total=draft.total,
            status=draft.status,
            po_ref=po_ref,
            notes=notes,
        )

    # --- State transitions ----------------------------------------------------

    def change_status(self, new_status: OrderStatus) -> None:
        if self.status == new_status:
            raise ValidationError(f"Order is already {new_status.value}")
        if not is_valid_transition(self.status, new_status):
            raise ValidationError(
                f"Cannot move order from {self.status.value} to {new_status.value}"
            )
        self.status = new_status

    # --- Computed properties --------------------------------------------------

    @property
    def currency(self) -> str:
        return self.total.currency

    @property
    def is_modifiable(self) -> bool:
        return bool(_TRANSITIONS[self.status])
