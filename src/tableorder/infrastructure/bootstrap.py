"""Composition root: builds the JSON repositories for the configured data dir.

The CLI calls these directly; the HTTP routers take them as FastAPI
dependencies, which tests override with in-memory fakes.
"""

from __future__ import annotations

from tableorder.infrastructure.config import get_settings
from tableorder.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from tableorder.infrastructure.persistence.json_reservation_repository import (
    JsonReservationRepository,
)


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(get_settings().data_dir / "orders.json")


def reservation_repository() -> JsonReservationRepository:
    return JsonReservationRepository(get_settings().data_dir / "reservations.json")
