"""Order endpoints: placing orders, kitchen status, discounts and surcharges."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from tableorder.application.add_adjustment import AddAdjustmentHandler
from tableorder.application.create_order import CreateOrderHandler
from tableorder.application.list_orders import ListOrdersHandler
from tableorder.application.remove_adjustment import RemoveAdjustmentHandler
from tableorder.application.show_order import ShowOrderHandler
from tableorder.application.update_adjustment import UpdateAdjustmentHandler
from tableorder.application.update_order_status import UpdateOrderStatusHandler
from tableorder.domain.exceptions import ValidationError
from tableorder.domain.repository.order_repository import OrderRepository
from tableorder.infrastructure.bootstrap import order_repository
from tableorder.infrastructure.http.schemas import (
    AdjustmentIn,
    AdjustmentPatchIn,
    CreateOrderRequest,
    OrderResponse,
    StatusUpdateRequest,
)

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("", response_model=List[OrderResponse])
def list_orders(
    shop_id: Optional[str] = Query(None, alias="shopId"),
    guest_id: Optional[str] = Query(None, alias="guestId"),
    order_status: Optional[str] = Query(None, alias="status"),
    repo: OrderRepository = Depends(order_repository),
) -> List[OrderResponse]:
    dtos = ListOrdersHandler(repo).handle(
        shop_id=shop_id, guest_id=guest_id, status=order_status
    )
    return [OrderResponse.from_dto(dto) for dto in dtos]


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def create_order(
    body: CreateOrderRequest,
    repo: OrderRepository = Depends(order_repository),
) -> OrderResponse:
    dto = CreateOrderHandler(repo).handle(
        shop_id=body.shopId,
        table_no=body.tableNo,
        item_specs=[item.to_spec() for item in body.items],
        adjustments=[adj.to_input() for adj in body.adjustments or []],
        guest_id=body.guestId,
        guest_name=body.guestName,
    )
    return OrderResponse.from_dto(dto)


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(
    order_id: str,
    repo: OrderRepository = Depends(order_repository),
) -> OrderResponse:
    return OrderResponse.from_dto(ShowOrderHandler(repo).handle(order_id))


@router.patch("/{order_id}", response_model=OrderResponse)
def update_order_status(
    order_id: str,
    body: StatusUpdateRequest,
    repo: OrderRepository = Depends(order_repository),
) -> OrderResponse:
    if not body.status:
        raise ValidationError("Status is required", fields={"status": "required"})
    dto = UpdateOrderStatusHandler(repo).handle(order_id, body.status)
    return OrderResponse.from_dto(dto)


@router.post("/{order_id}/adjustments", response_model=OrderResponse)
def add_adjustment(
    order_id: str,
    body: AdjustmentIn,
    repo: OrderRepository = Depends(order_repository),
) -> OrderResponse:
    dto = AddAdjustmentHandler(repo).handle(order_id, body.to_input())
    return OrderResponse.from_dto(dto)


@router.patch("/{order_id}/adjustments/{adjustment_id}", response_model=OrderResponse)
def update_adjustment(
    order_id: str,
    adjustment_id: str,
    body: AdjustmentPatchIn,
    repo: OrderRepository = Depends(order_repository),
) -> OrderResponse:
    dto = UpdateAdjustmentHandler(repo).handle(order_id, adjustment_id, body.to_patch())
    return OrderResponse.from_dto(dto)


@router.delete("/{order_id}/adjustments/{adjustment_id}", response_model=OrderResponse)
def remove_adjustment(
    order_id: str,
    adjustment_id: str,
    repo: OrderRepository = Depends(order_repository),
) -> OrderResponse:
    dto = RemoveAdjustmentHandler(repo).handle(order_id, adjustment_id)
    return OrderResponse.from_dto(dto)
