"""Application service: Update Order Status use case.

Front of house moves an order along ``new -> served -> paid``; the
aggregate rejects unknown labels and out-of-order moves.
"""

from __future__ import annotations

import logging

from tableorder.application.dto import OrderDTO, order_to_dto
from tableorder.domain.exceptions import NotFoundError
from tableorder.domain.model.order import OrderStatus
from tableorder.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, status: str | OrderStatus) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")

        previous = order.status
        order.transition(status)
        self._order_repo.save(order)

        if order.status != previous:
            logger.info(
                "Order %s status %s -> %s", order.id, previous.value, order.status.value
            )
        return order_to_dto(order)

    def mark_served(self, order_id: str) -> OrderDTO:
        return self.handle(order_id, OrderStatus.SERVED)

    def mark_paid(self, order_id: str) -> OrderDTO:
        return self.handle(order_id, OrderStatus.PAID)
