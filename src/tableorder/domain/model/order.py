"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items and adjustments.
All pricing and status invariants are enforced here:

- ``subtotal`` is the sum of ``price * quantity`` over the items
- ``total_price`` is ``subtotal`` plus every adjustment amount, rebuilt
  from scratch after each adjustment change
- status only moves forward along ``new -> served -> paid``
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from tableorder.domain.exceptions import InvalidStatusError, NotFoundError, ValidationError
from tableorder.domain.model.adjustment import (
    AdjustmentSpec,
    AdjustmentType,
    AdjustmentValueType,
    Number,
    OrderAdjustment,
)
from tableorder.domain.model.value_objects import Price, Quantity
from tableorder.domain.service.adjustment_calculator import compute_amount


class OrderStatus(Enum):
    NEW = "new"
    SERVED = "served"
    PAID = "paid"

    @classmethod
    def parse(cls, label: str | OrderStatus) -> OrderStatus:
        if isinstance(label, cls):
            return label
        try:
            return cls(label)
        except ValueError:
            raise InvalidStatusError(
                f"Invalid status {label!r}. Must be: new, served, or paid",
                fields={"status": "must be new, served, or paid"},
            ) from None


# Allowed forward moves; re-applying the current status is a no-op.
_ORDER_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.NEW: frozenset({OrderStatus.SERVED}),
    OrderStatus.SERVED: frozenset({OrderStatus.PAID}),
    OrderStatus.PAID: frozenset(),
}


@dataclass(frozen=True)
class OrderItem:
    """A line on the order, snapshotting the menu price at order time.

    Immutable: a quantity change means replacing the line.
    """

    menu_item_id: str
    name: str
    price: Price
    quantity: Quantity
    sku_id: str | None = None

    @property
    def line_total(self) -> int:
        return self.price * self.quantity


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_adjustment_id() -> str:
    return uuid4().hex


@dataclass
class Order:
    """Aggregate root for table orders.

    Use the ``Order.create()`` factory for new orders — it validates input
    and derives the totals.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: str | None
    shop_id: str
    table_no: str
    items: list[OrderItem]
    adjustments: list[OrderAdjustment] = field(default_factory=list)
    subtotal: int = 0
    total_price: int = 0
    status: OrderStatus = OrderStatus.NEW
    guest_id: str | None = None
    guest_name: str | None = None
    created_at: datetime = field(default_factory=_utcnow)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        shop_id: str,
        table_no: str,
        items: list[OrderItem],
        adjustments: list[AdjustmentSpec] | None = None,
        guest_id: str | None = None,
        guest_name: str | None = None,
        now: datetime | None = None,
    ) -> Order:
        """Create a new order in ``new`` status with derived totals."""
        missing: dict[str, str] = {}
        if not shop_id or not shop_id.strip():
            missing["shopId"] = "required"
        if not table_no or not table_no.strip():
            missing["tableNo"] = "required"
        if not items:
            missing["items"] = "at least one item required"
        if missing:
            raise ValidationError(
                "shopId, tableNo, and items are required", fields=missing
            )

        specs = list(adjustments or [])
        for spec in specs:
            spec.validate()

        order = Order(
            id=None,
            shop_id=shop_id.strip(),
            table_no=table_no.strip(),
            items=list(items),
            guest_id=guest_id or None,
            guest_name=guest_name or None,
            created_at=now or _utcnow(),
        )
        order.subtotal = sum(item.line_total for item in order.items)
        order.adjustments = [order._price(_new_adjustment_id(), spec) for spec in specs]
        order._recompute_total()
        return order

    # --- Adjustments ----------------------------------------------------------

    def add_adjustment(self, spec: AdjustmentSpec) -> OrderAdjustment:
        """Append a discount or surcharge priced against the stored subtotal."""
        spec.validate()
        adjustment = self._price(_new_adjustment_id(), spec)
        self.adjustments.append(adjustment)
        self._recompute_total()
        return adjustment

    def update_adjustment(
        self,
        adjustment_id: str,
        name: str | None = None,
        adjustment_type: AdjustmentType | None = None,
        value_type: AdjustmentValueType | None = None,
        value: Number | None = None,
    ) -> OrderAdjustment:
        """Merge the given fields into an adjustment and re-price it.

        Fields left as ``None`` keep their current value.
        """
        index = self._index_of(adjustment_id)
        current = self.adjustments[index]

        merged = AdjustmentSpec(
            name=current.name if name is None else name,
            type=current.type if adjustment_type is None else adjustment_type,
            value_type=current.value_type if value_type is None else value_type,
            value=current.value if value is None else value,
        )
        merged.validate()

        updated = self._price(current.id, merged)
        self.adjustments[index] = updated
        self._recompute_total()
        return updated

    def remove_adjustment(self, adjustment_id: str) -> OrderAdjustment:
        """Drop an adjustment. Unknown ids raise ``NotFoundError``."""
        index = self._index_of(adjustment_id)
        removed = self.adjustments.pop(index)
        self._recompute_total()
        return removed

    # --- State transitions ----------------------------------------------------

    def transition(self, new_status: str | OrderStatus) -> None:
        """Move to *new_status* if the transition table allows it.

        Raises InvalidStatusError for unknown labels and for backward or
        skipping moves (e.g. ``paid -> new`` or ``new -> paid``).
        """
        target = OrderStatus.parse(new_status)
        if target == self.status:
            return
        if target not in _ORDER_TRANSITIONS[self.status]:
            raise InvalidStatusError(
                f"Cannot change order status from {self.status.value} to {target.value}",
                fields={"status": f"not allowed from {self.status.value}"},
            )
        self.status = target

    def mark_served(self) -> None:
        self.transition(OrderStatus.SERVED)

    def mark_paid(self) -> None:
        self.transition(OrderStatus.PAID)

    # --- Internal helpers -----------------------------------------------------

    def _price(self, adjustment_id: str, spec: AdjustmentSpec) -> OrderAdjustment:
        return OrderAdjustment(
            id=adjustment_id,
            name=spec.name.strip(),
            type=spec.type,
            value_type=spec.value_type,
            value=spec.value,
            amount=compute_amount(self.subtotal, spec),
        )

    def _recompute_total(self) -> None:
        self.total_price = self.subtotal + sum(a.amount for a in self.adjustments)

    def _index_of(self, adjustment_id: str) -> int:
        for i, adjustment in enumerate(self.adjustments):
            if adjustment.id == adjustment_id:
                return i
        raise NotFoundError(
            f"Adjustment '{adjustment_id}' not found on order {self.id}"
        )
