"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from rms.domain.exceptions import ValidationError

_CENTS = Decimal("0.01")

MIN_QUANTITY = 1
MAX_QUANTITY = 99


@dataclass(frozen=True, order=True)
class Money:
    """Monetary amount, always held with exactly two fraction digits.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        object.__setattr__(self, "amount", self.amount.quantize(_CENTS, ROUND_HALF_UP))

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int) or isinstance(factor, bool):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A line quantity between 1 and 99 units."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if not MIN_QUANTITY <= self.value <= MAX_QUANTITY:
            raise ValidationError(
                f"Quantity must be between {MIN_QUANTITY} and {MAX_QUANTITY}"
            )

    def __str__(self) -> str:
        return str(self.value)
