"""Application service: Create Reservation use case."""

from __future__ import annotations

import logging

from tableorder.application.dto import ReservationDTO, reservation_to_dto
from tableorder.domain.model.reservation import Reservation
from tableorder.domain.repository.reservation_repository import ReservationRepository

logger = logging.getLogger(__name__)


class CreateReservationHandler:

    def __init__(self, reservation_repo: ReservationRepository) -> None:
        self._reservation_repo = reservation_repo

    def handle(
        self,
        shop_id: str,
        table_no: str,
        time: str,
        phone: str | None = None,
        source: str | None = None,
        status: str | None = None,
    ) -> ReservationDTO:
        reservation = Reservation.create(
            shop_id=shop_id,
            table_no=table_no,
            time=time,
            phone=phone,
            source=source,
            status=status,
        )
        self._reservation_repo.save(reservation)

        logger.info(
            "Created reservation %s for shop %s table %s at %s (%s)",
            reservation.id, reservation.shop_id, reservation.table_no,
            reservation.time, reservation.source.value,
        )
        return reservation_to_dto(reservation)
