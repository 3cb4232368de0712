"""Abstract repository for Reservation aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from tableorder.domain.model.reservation import Reservation, ReservationStatus


class ReservationRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a fresh unique reservation ID."""

    @abstractmethod
    def get_by_id(self, reservation_id: str) -> Reservation | None:
        """Return a reservation by its ID, or None if not found."""

    @abstractmethod
    def find(
        self,
        shop_id: str | None = None,
        status: ReservationStatus | None = None,
    ) -> list[Reservation]:
        """Return reservations matching every filter that is not None."""

    @abstractmethod
    def save(self, reservation: Reservation) -> None:
        """Persist a new or updated reservation, assigning an ID if it has none."""
