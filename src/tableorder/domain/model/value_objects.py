"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from tableorder.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Price:
    """Unit price in the currency's minor unit.

    Integers only: every amount in the system is kept in minor units so
    sums never accumulate floating-point error.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Price must be an integer, got {type(self.value).__name__}",
                fields={"price": "must be an integer"},
            )
        if self.value < 0:
            raise ValidationError(
                f"Price cannot be negative, got {self.value}",
                fields={"price": "must be >= 0"},
            )

    def __mul__(self, quantity: Quantity) -> int:
        return self.value * quantity.value

    def __str__(self) -> str:
        return f"${self.value}"


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}",
                fields={"quantity": "must be an integer"},
            )
        if self.value <= 0:
            raise ValidationError(
                "Quantity must be positive", fields={"quantity": "must be > 0"}
            )

    def __str__(self) -> str:
        return str(self.value)


def format_amount(amount: int) -> str:
    """Render a signed minor-unit amount, e.g. ``-20`` as ``-$20``."""
    if amount < 0:
        return f"-${-amount}"
    return f"${amount}"
