"""Application service: Create Order use case.

Turns the submitted lines and optional starting adjustments into an
Order aggregate, lets the aggregate validate and price itself, then
persists it.
"""

from __future__ import annotations

import logging

from tableorder.application.dto import (
    AdjustmentInput,
    OrderDTO,
    OrderItemSpec,
    order_to_dto,
)
from tableorder.domain.model.order import Order
from tableorder.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        shop_id: str,
        table_no: str,
        item_specs: list[OrderItemSpec],
        adjustments: list[AdjustmentInput] | None = None,
        guest_id: str | None = None,
        guest_name: str | None = None,
    ) -> OrderDTO:
        """Create a new table order.

        Steps:
        1. Build OrderItems (value objects reject bad price/quantity).
        2. Parse adjustment labels into domain specs.
        3. Let the Order aggregate validate and derive its totals.
        4. Persist and return a DTO.
        """
        items = [spec.to_domain() for spec in item_specs]
        specs = [adj.to_domain() for adj in adjustments or []]

        order = Order.create(
            shop_id=shop_id,
            table_no=table_no,
            items=items,
            adjustments=specs,
            guest_id=guest_id,
            guest_name=guest_name,
        )
        self._order_repo.save(order)

        logger.info(
            "Created order %s for shop %s table %s (subtotal=%d, total=%d)",
            order.id, order.shop_id, order.table_no, order.subtotal, order.total_price,
        )
        return order_to_dto(order)
