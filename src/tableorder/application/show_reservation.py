"""Application service: Show Reservation use case (query)."""

from __future__ import annotations

from tableorder.application.dto import ReservationDTO, reservation_to_dto
from tableorder.domain.exceptions import NotFoundError
from tableorder.domain.repository.reservation_repository import ReservationRepository


class ShowReservationHandler:

    def __init__(self, reservation_repo: ReservationRepository) -> None:
        self._reservation_repo = reservation_repo

    def handle(self, reservation_id: str) -> ReservationDTO:
        reservation = self._reservation_repo.get_by_id(reservation_id)
        if reservation is None:
            raise NotFoundError(f"Reservation {reservation_id} not found")
        return reservation_to_dto(reservation)
