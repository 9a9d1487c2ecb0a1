"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from dealer_pricing.domain.model.cart import Cart
from dealer_pricing.domain.model.dealer import DealerAccount, DealerBandAssignment
from dealer_pricing.domain.model.order import Order
from dealer_pricing.domain.model.product import PartType, Product
from dealer_pricing.domain.repository.cart_repository import CartRepository
from dealer_pricing.domain.repository.catalog_repository import CatalogRepository
from dealer_pricing.domain.repository.dealer_repository import DealerRepository
from dealer_pricing.domain.repository.order_repository import OrderRepository


class FakeCatalogRepository(CatalogRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.code] = p

    def find_product_by_code(self, code: str) -> Product | None:
        return self._store.get(code)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.code] = product


class FakeDealerRepository(DealerRepository):

    def __init__(
        self,
        accounts: list[DealerAccount] | None = None,
        assignments: list[DealerBandAssignment] | None = None,
    ) -> None:
        self._accounts: dict[str, DealerAccount] = {}
        self._assignments: dict[tuple[str, PartType], DealerBandAssignment] = {}
        for a in accounts or []:
            self.save_account(a)
        for b in assignments or []:
            self.save_band_assignment(b)

    def find_dealer_account(self, dealer_account_id: str) -> DealerAccount | None:
        return self._accounts.get(dealer_account_id)

    def find_band_assignment(
        self, dealer_account_id: str, part_type: PartType
    ) -> DealerBandAssignment | None:
        return self._assignments.get((dealer_account_id, part_type))

    def list_band_assignments(self, dealer_account_id: str) -> list[DealerBandAssignment]:
        return [
            a for (dealer_id, _), a in self._assignments.items()
            if dealer_id == dealer_account_id
        ]

    def save_account(self, account: DealerAccount) -> None:
        self._accounts[account.id] = account

    def save_band_assignment(self, assignment: DealerBandAssignment) -> None:
        key = (assignment.dealer_account_id, assignment.part_type)
        self._assignments[key] = assignment


class FakeCartRepository(CartRepository):

    def __init__(self) -> None:
        self._store: dict[str, Cart] = {}

    def get_for_user(self, dealer_user_id: str) -> Cart | None:
        return self._store.get(dealer_user_id)

    def save(self, cart: Cart) -> None:
        self._store[cart.dealer_user_id] = cart


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1

    def next_id(self) -> int:
        return self._next_id

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def list_for_dealer(self, dealer_account_id: str) -> list[Order]:
        return [o for o in self._store.values() if o.dealer_account_id == dealer_account_id]

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._next_id
        self._store[order.id] = order
        self._next_id = max(self._next_id, order.id + 1)
