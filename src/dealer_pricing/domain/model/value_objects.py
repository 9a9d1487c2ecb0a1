"""Value Objects shared across the pricing domain.

Money and Quantity validate themselves on construction, so a price or a
line quantity that exists is always a legal one.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import total_ordering

from dealer_pricing.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "GBP"
MAX_QUANTITY = 9999

_SYMBOLS = {"GBP": "£", "USD": "$", "EUR": "€"}


@total_ordering
@dataclass(frozen=True)
class Money:
    """A non-negative Decimal amount in one currency.

    Band prices, floors, line totals and subtotals are all Money.  Nothing
    here rounds: 3 x £0.10 is exactly £0.30.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Price must be a Decimal amount, not {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Price must be a finite amount, got {self.amount}")
        if self.amount.is_signed():
            raise ValidationError(f"Price cannot be negative: {self.amount}")

    # --- Arithmetic -----------------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + self._same_currency(other).amount, self.currency)

    def __mul__(self, qty: int) -> Money:
        """Scale a unit price by a line quantity."""
        if isinstance(qty, bool) or not isinstance(qty, int):
            raise TypeError(f"Money can only be scaled by an int quantity, not {qty!r}")
        return Money(self.amount * qty, self.currency)

    def __lt__(self, other: Money) -> bool:
        return self.amount < self._same_currency(other).amount

    def __str__(self) -> str:
        symbol = _SYMBOLS.get(self.currency)
        if symbol is None:
            return f"{self.amount:.2f} {self.currency}"
        return f"{symbol}{self.amount:.2f}"

    def _same_currency(self, other: Money) -> Money:
        if other.currency != self.currency:
            raise ValidationError(
                f"Currency mismatch: {self.currency} vs {other.currency}"
            )
        return other

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | int | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        """Build from a string or int, e.g. ``Money.of("95.00")``."""
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Not a price: {amount!r}") from exc
        return Money(value, currency)

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(Decimal("0.00"), currency)


@dataclass(frozen=True)
class Quantity:
    """Units on one line: 1..MAX_QUANTITY."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True is not a quantity.
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(f"Quantity must be a whole number, not {self.value!r}")
        if not 1 <= self.value <= MAX_QUANTITY:
            raise ValidationError(
                f"Quantity must be between 1 and {MAX_QUANTITY}, got {self.value}"
            )

    def __str__(self) -> str:
        return str(self.value)
