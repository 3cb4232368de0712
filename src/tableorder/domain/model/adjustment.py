"""Adjustments: discounts and surcharges applied on top of an order subtotal.

An adjustment is described by *what* it is (``type``), *how* its value is
read (``value_type``) and the raw ``value``. The signed ``amount`` is never
supplied by callers; it is derived from the order subtotal by the
adjustment calculator.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from tableorder.domain.exceptions import ValidationError


class AdjustmentType(Enum):
    DISCOUNT = "discount"
    SURCHARGE = "surcharge"

    @classmethod
    def parse(cls, label: str | AdjustmentType) -> AdjustmentType:
        if isinstance(label, cls):
            return label
        try:
            return cls(label)
        except ValueError:
            raise ValidationError(
                f"Invalid adjustment type {label!r}. Must be: discount or surcharge",
                fields={"type": "must be discount or surcharge"},
            ) from None


class AdjustmentValueType(Enum):
    FIXED = "fixed"
    PERCENTAGE = "percentage"

    @classmethod
    def parse(cls, label: str | AdjustmentValueType) -> AdjustmentValueType:
        if isinstance(label, cls):
            return label
        try:
            return cls(label)
        except ValueError:
            raise ValidationError(
                f"Invalid value type {label!r}. Must be: fixed or percentage",
                fields={"valueType": "must be fixed or percentage"},
            ) from None


Number = int | float | Decimal


@dataclass(frozen=True)
class AdjustmentSpec:
    """Input: the caller-supplied part of an adjustment."""

    name: str
    type: AdjustmentType
    value_type: AdjustmentValueType
    value: Number

    def validate(self) -> None:
        """Reject specs the calculator should never see.

        The calculator itself accepts any number; keeping junk out of an
        order is the aggregate's job.
        """
        if not self.name or not self.name.strip():
            raise ValidationError(
                "Adjustment name is required", fields={"name": "required"}
            )
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float, Decimal)):
            raise ValidationError(
                f"Adjustment value must be a number, got {type(self.value).__name__}",
                fields={"value": "must be a number"},
            )
        if isinstance(self.value, float) and not math.isfinite(self.value):
            raise ValidationError(
                "Adjustment value must be finite", fields={"value": "must be finite"}
            )
        if isinstance(self.value, Decimal) and not self.value.is_finite():
            raise ValidationError(
                "Adjustment value must be finite", fields={"value": "must be finite"}
            )
        if self.value < 0:
            raise ValidationError(
                f"Adjustment value cannot be negative, got {self.value}",
                fields={"value": "must be >= 0"},
            )


@dataclass(frozen=True)
class OrderAdjustment:
    """An adjustment as stored on an order, with its derived ``amount``.

    Replaced wholesale on update so a half-applied change is never visible.
    """

    id: str
    name: str
    type: AdjustmentType
    value_type: AdjustmentValueType
    value: Number
    amount: int
