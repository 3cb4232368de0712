"""Application service: Update Adjustment use case."""

from __future__ import annotations

import logging

from tableorder.application.dto import AdjustmentPatch, OrderDTO, order_to_dto
from tableorder.domain.exceptions import NotFoundError
from tableorder.domain.model.adjustment import AdjustmentType, AdjustmentValueType
from tableorder.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateAdjustmentHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, adjustment_id: str, patch: AdjustmentPatch) -> OrderDTO:
        """Merge *patch* into an existing adjustment and re-price it."""
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")

        updated = order.update_adjustment(
            adjustment_id,
            name=patch.name,
            adjustment_type=AdjustmentType.parse(patch.type) if patch.type is not None else None,
            value_type=(
                AdjustmentValueType.parse(patch.value_type)
                if patch.value_type is not None
                else None
            ),
            value=patch.value,
        )
        self._order_repo.save(order)

        logger.info(
            "Updated adjustment %s on order %s to %d, total now %d",
            updated.id, order.id, updated.amount, order.total_price,
        )
        return order_to_dto(order)
