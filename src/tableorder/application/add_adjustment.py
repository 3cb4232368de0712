"""Application service: Add Adjustment use case.

Prices a new discount or surcharge against the order's stored subtotal
and saves the order with its rebuilt total.
"""

from __future__ import annotations

import logging

from tableorder.application.dto import AdjustmentInput, OrderDTO, order_to_dto
from tableorder.domain.exceptions import NotFoundError
from tableorder.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class AddAdjustmentHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, adjustment: AdjustmentInput) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")

        added = order.add_adjustment(adjustment.to_domain())
        self._order_repo.save(order)

        logger.info(
            "Added %s '%s' (%d) to order %s, total now %d",
            added.type.value, added.name, added.amount, order.id, order.total_price,
        )
        return order_to_dto(order)
