"""Domain service: Adjustment Calculator.

Turns a discount/surcharge description into a signed amount in minor
currency units. Stateless and side-effect free so the Order aggregate can
call it on every mutation and rebuild its total from scratch.

Rounding is half-up on the magnitude (``Decimal`` with ``ROUND_HALF_UP``),
so 10% of 105 is 11 and a 10% discount on 105 is -11.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Protocol

from tableorder.domain.model.adjustment import (
    AdjustmentType,
    AdjustmentValueType,
    Number,
)

_HUNDRED = Decimal("100")


class PricedAdjustment(Protocol):
    type: AdjustmentType
    value_type: AdjustmentValueType
    value: Number


def compute_amount(subtotal: int, spec: PricedAdjustment) -> int:
    """Return the signed amount *spec* contributes to an order total.

    - fixed: the value itself, already in minor units
    - percentage: ``subtotal * value / 100``

    Discounts come back negative, surcharges positive. The value is not
    validated here.
    """
    value = Decimal(str(spec.value))

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _exact_precision(subtotal, value))
        if spec.value_type is AdjustmentValueType.PERCENTAGE:
            raw = Decimal(subtotal) * value / _HUNDRED
        else:
            raw = value
        magnitude = int(raw.to_integral_value(rounding=ROUND_HALF_UP))

    if spec.type is AdjustmentType.DISCOUNT:
        return -magnitude
    return magnitude


def _exact_precision(subtotal: int, value: Decimal) -> int:
    """Digits needed so ``subtotal * value / 100`` is never rounded."""
    _, digits, exponent = value.as_tuple()
    if not isinstance(exponent, int):
        return 0
    return len(str(abs(subtotal))) + len(digits) + max(exponent, 0) + 2
