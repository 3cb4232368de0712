"""Request and response bodies for the HTTP API.

Field names are the camelCase names of the JSON wire format.  Bodies are
deliberately permissive about missing business fields (empty defaults) so
that the domain, not pydantic, decides what is required and reports it
with the offending field names.
"""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel

from tableorder.application.dto import (
    AdjustmentDTO,
    AdjustmentInput,
    AdjustmentPatch,
    OrderDTO,
    OrderItemSpec,
    ReservationDTO,
)
from tableorder.infrastructure.serialization import optional_millis, to_millis

Number = Union[int, float]


# --- Requests -----------------------------------------------------------------


class OrderItemIn(BaseModel):
    menuItemId: str
    skuId: Optional[str] = None
    name: str
    price: int
    quantity: int

    def to_spec(self) -> OrderItemSpec:
        return OrderItemSpec(
            menu_item_id=self.menuItemId,
            name=self.name,
            price=self.price,
            quantity=self.quantity,
            sku_id=self.skuId,
        )


class AdjustmentIn(BaseModel):
    name: str = ""
    type: str
    valueType: str
    value: Number

    def to_input(self) -> AdjustmentInput:
        return AdjustmentInput(
            name=self.name, type=self.type, value_type=self.valueType, value=self.value
        )


class AdjustmentPatchIn(BaseModel):
    name: Optional[str] = None
    type: Optional[str] = None
    valueType: Optional[str] = None
    value: Optional[Number] = None

    def to_patch(self) -> AdjustmentPatch:
        return AdjustmentPatch(
            name=self.name, type=self.type, value_type=self.valueType, value=self.value
        )


class CreateOrderRequest(BaseModel):
    shopId: str = ""
    tableNo: str = ""
    items: List[OrderItemIn] = []
    adjustments: Optional[List[AdjustmentIn]] = None
    guestId: Optional[str] = None
    guestName: Optional[str] = None


class StatusUpdateRequest(BaseModel):
    status: Optional[str] = None


class CreateReservationRequest(BaseModel):
    shopId: str = ""
    tableNo: str = ""
    time: str = ""
    phone: Optional[str] = None
    source: Optional[str] = None
    status: Optional[str] = None


# --- Responses ----------------------------------------------------------------


class OrderItemOut(BaseModel):
    menuItemId: str
    skuId: Optional[str] = None
    name: str
    price: int
    quantity: int


class AdjustmentOut(BaseModel):
    id: str
    name: str
    type: str
    valueType: str
    value: Number
    amount: int

    @classmethod
    def from_dto(cls, dto: AdjustmentDTO) -> AdjustmentOut:
        return cls(
            id=dto.id,
            name=dto.name,
            type=dto.type,
            valueType=dto.value_type,
            value=dto.value,
            amount=dto.amount,
        )


class OrderResponse(BaseModel):
    id: str
    shopId: str
    tableNo: str
    guestId: Optional[str] = None
    guestName: Optional[str] = None
    items: List[OrderItemOut]
    adjustments: List[AdjustmentOut]
    subtotal: int
    totalPrice: int
    status: str
    createdAt: int

    @classmethod
    def from_dto(cls, dto: OrderDTO) -> OrderResponse:
        return cls(
            id=dto.id,
            shopId=dto.shop_id,
            tableNo=dto.table_no,
            guestId=dto.guest_id,
            guestName=dto.guest_name,
            items=[
                OrderItemOut(
                    menuItemId=item.menu_item_id,
                    skuId=item.sku_id,
                    name=item.name,
                    price=item.price,
                    quantity=item.quantity,
                )
                for item in dto.items
            ],
            adjustments=[AdjustmentOut.from_dto(a) for a in dto.adjustments],
            subtotal=dto.subtotal,
            totalPrice=dto.total_price,
            status=dto.status,
            createdAt=to_millis(dto.created_at),
        )


class ReservationResponse(BaseModel):
    id: str
    shopId: str
    tableNo: str
    time: str
    phone: str
    source: str
    status: str
    checkInTime: Optional[int] = None

    @classmethod
    def from_dto(cls, dto: ReservationDTO) -> ReservationResponse:
        return cls(
            id=dto.id,
            shopId=dto.shop_id,
            tableNo=dto.table_no,
            time=dto.time,
            phone=dto.phone,
            source=dto.source,
            status=dto.status,
            checkInTime=optional_millis(dto.check_in_time),
        )
