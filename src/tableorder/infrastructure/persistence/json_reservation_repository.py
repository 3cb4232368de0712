"""JSON-file-backed implementation of ReservationRepository."""

from __future__ import annotations

from pathlib import Path
from uuid import uuid4

from tableorder.domain.model.reservation import (
    Reservation,
    ReservationSource,
    ReservationStatus,
)
from tableorder.domain.repository.reservation_repository import ReservationRepository
from tableorder.infrastructure.persistence.json_collection import JsonCollection
from tableorder.infrastructure.serialization import from_millis, to_millis


class JsonReservationRepository(ReservationRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path)

    # --- ReservationRepository interface --------------------------------------

    def next_id(self) -> str:
        return str(uuid4())

    def get_by_id(self, reservation_id: str) -> Reservation | None:
        for raw in self._collection.load():
            if raw["id"] == reservation_id:
                return self._to_domain(raw)
        return None

    def find(
        self,
        shop_id: str | None = None,
        status: ReservationStatus | None = None,
    ) -> list[Reservation]:
        return [
            self._to_domain(raw)
            for raw in self._collection.load()
            if (shop_id is None or raw["shopId"] == shop_id)
            and (status is None or raw["status"] == status.value)
        ]

    def save(self, reservation: Reservation) -> None:
        if reservation.id is None:
            reservation.id = self.next_id()
        self._collection.upsert(self._to_raw(reservation))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(reservation: Reservation) -> dict:
        raw = {
            "id": reservation.id,
            "shopId": reservation.shop_id,
            "time": reservation.time,
            "tableNo": reservation.table_no,
            "phone": reservation.phone,
            "source": reservation.source.value,
            "status": reservation.status.value,
        }
        if reservation.check_in_time is not None:
            raw["checkInTime"] = to_millis(reservation.check_in_time)
        return raw

    @staticmethod
    def _to_domain(raw: dict) -> Reservation:
        check_in = raw.get("checkInTime")
        return Reservation(
            id=raw["id"],
            shop_id=raw["shopId"],
            table_no=raw["tableNo"],
            time=raw["time"],
            phone=raw.get("phone", ""),
            source=ReservationSource(raw["source"]),
            status=ReservationStatus(raw["status"]),
            check_in_time=from_millis(check_in) if check_in is not None else None,
        )
