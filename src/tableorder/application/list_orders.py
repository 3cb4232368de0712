"""Application service: List Orders use case (query).

Backs the kitchen board (all orders of a shop) and the guest's own order
history (orders of a shop placed by one guest).
"""

from __future__ import annotations

from tableorder.application.dto import OrderDTO, order_to_dto
from tableorder.domain.model.order import OrderStatus
from tableorder.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        shop_id: str | None = None,
        guest_id: str | None = None,
        status: str | None = None,
    ) -> list[OrderDTO]:
        """Return matching orders, newest first."""
        wanted = OrderStatus.parse(status) if status else None
        orders = self._order_repo.find(shop_id=shop_id, guest_id=guest_id, status=wanted)
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return [order_to_dto(o) for o in orders]
