"""Application service: Remove Adjustment use case."""

from __future__ import annotations

import logging

from tableorder.application.dto import OrderDTO, order_to_dto
from tableorder.domain.exceptions import NotFoundError
from tableorder.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class RemoveAdjustmentHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, adjustment_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")

        removed = order.remove_adjustment(adjustment_id)
        self._order_repo.save(order)

        logger.info(
            "Removed adjustment %s '%s' from order %s, total now %d",
            removed.id, removed.name, order.id, order.total_price,
        )
        return order_to_dto(order)
