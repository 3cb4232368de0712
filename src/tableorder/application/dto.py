"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the outer layers (CLI, HTTP) and the application
layer without exposing domain internals.  Inputs hold raw labels exactly
as callers send them; parsing them into domain enums happens here so
every entry point rejects bad labels the same way.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from tableorder.domain.model.adjustment import (
    AdjustmentSpec,
    AdjustmentType,
    AdjustmentValueType,
    Number,
    OrderAdjustment,
)
from tableorder.domain.model.order import Order, OrderItem
from tableorder.domain.model.reservation import Reservation
from tableorder.domain.model.value_objects import Price, Quantity

# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one menu line the guest picked."""

    menu_item_id: str
    name: str
    price: int
    quantity: int
    sku_id: str | None = None

    def to_domain(self) -> OrderItem:
        return OrderItem(
            menu_item_id=self.menu_item_id,
            name=self.name,
            price=Price(self.price),
            quantity=Quantity(self.quantity),
            sku_id=self.sku_id or None,
        )


@dataclass(frozen=True)
class AdjustmentInput:
    """Input: a discount or surcharge as typed by staff."""

    name: str
    type: str
    value_type: str
    value: Number

    def to_domain(self) -> AdjustmentSpec:
        return AdjustmentSpec(
            name=self.name,
            type=AdjustmentType.parse(self.type),
            value_type=AdjustmentValueType.parse(self.value_type),
            value=self.value,
        )


@dataclass(frozen=True)
class AdjustmentPatch:
    """Input: a partial adjustment update; ``None`` means keep as is."""

    name: str | None = None
    type: str | None = None
    value_type: str | None = None
    value: Number | None = None


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OrderItemDTO:
    menu_item_id: str
    sku_id: str | None
    name: str
    price: int
    quantity: int
    line_total: int


@dataclass(frozen=True)
class AdjustmentDTO:
    id: str
    name: str
    type: str
    value_type: str
    value: Number
    amount: int


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order with its derived totals."""

    id: str
    shop_id: str
    table_no: str
    guest_id: str | None
    guest_name: str | None
    items: list[OrderItemDTO]
    adjustments: list[AdjustmentDTO]
    subtotal: int
    total_price: int
    status: str
    created_at: datetime


@dataclass(frozen=True)
class ReservationDTO:
    id: str
    shop_id: str
    table_no: str
    time: str
    phone: str
    source: str
    status: str
    check_in_time: datetime | None


# ---------------------------------------------------------------------------
# Mapping
# ---------------------------------------------------------------------------


def adjustment_to_dto(adjustment: OrderAdjustment) -> AdjustmentDTO:
    return AdjustmentDTO(
        id=adjustment.id,
        name=adjustment.name,
        type=adjustment.type.value,
        value_type=adjustment.value_type.value,
        value=adjustment.value,
        amount=adjustment.amount,
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        shop_id=order.shop_id,
        table_no=order.table_no,
        guest_id=order.guest_id,
        guest_name=order.guest_name,
        items=[
            OrderItemDTO(
                menu_item_id=item.menu_item_id,
                sku_id=item.sku_id,
                name=item.name,
                price=item.price.value,
                quantity=item.quantity.value,
                line_total=item.line_total,
            )
            for item in order.items
        ],
        adjustments=[adjustment_to_dto(a) for a in order.adjustments],
        subtotal=order.subtotal,
        total_price=order.total_price,
        status=order.status.value,
        created_at=order.created_at,
    )


def reservation_to_dto(reservation: Reservation) -> ReservationDTO:
    return ReservationDTO(
        id=reservation.id,  # type: ignore[arg-type]
        shop_id=reservation.shop_id,
        table_no=reservation.table_no,
        time=reservation.time,
        phone=reservation.phone,
        source=reservation.source.value,
        status=reservation.status.value,
        check_in_time=reservation.check_in_time,
    )
