"""Application service: List Reservations use case (query)."""

from __future__ import annotations

from tableorder.application.dto import ReservationDTO, reservation_to_dto
from tableorder.domain.model.reservation import ReservationStatus
from tableorder.domain.repository.reservation_repository import ReservationRepository


class ListReservationsHandler:

    def __init__(self, reservation_repo: ReservationRepository) -> None:
        self._reservation_repo = reservation_repo

    def handle(
        self,
        shop_id: str | None = None,
        status: str | None = None,
    ) -> list[ReservationDTO]:
        """Return matching reservations ordered by booked time."""
        wanted = ReservationStatus.parse(status) if status else None
        reservations = self._reservation_repo.find(shop_id=shop_id, status=wanted)
        reservations.sort(key=lambda r: r.time)
        return [reservation_to_dto(r) for r in reservations]
