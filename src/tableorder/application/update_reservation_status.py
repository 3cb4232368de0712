"""Application service: Update Reservation Status use case.

Checking a party in stamps the check-in time on the aggregate; the
handler only loads, delegates and saves.
"""

from __future__ import annotations

import logging

from tableorder.application.dto import ReservationDTO, reservation_to_dto
from tableorder.domain.exceptions import NotFoundError
from tableorder.domain.model.reservation import ReservationStatus
from tableorder.domain.repository.reservation_repository import ReservationRepository

logger = logging.getLogger(__name__)


class UpdateReservationStatusHandler:

    def __init__(self, reservation_repo: ReservationRepository) -> None:
        self._reservation_repo = reservation_repo

    def handle(self, reservation_id: str, status: str | ReservationStatus) -> ReservationDTO:
        reservation = self._reservation_repo.get_by_id(reservation_id)
        if reservation is None:
            raise NotFoundError(f"Reservation {reservation_id} not found")

        previous = reservation.status
        reservation.transition(status)
        self._reservation_repo.save(reservation)

        if reservation.status != previous:
            logger.info(
                "Reservation %s status %s -> %s",
                reservation.id, previous.value, reservation.status.value,
            )
        return reservation_to_dto(reservation)

    def check_in(self, reservation_id: str) -> ReservationDTO:
        return self.handle(reservation_id, ReservationStatus.SEATED)

    def cancel(self, reservation_id: str) -> ReservationDTO:
        return self.handle(reservation_id, ReservationStatus.CANCELLED)
