"""Reservation aggregate — a booked or walk-in table slot.

Reservations live independently of orders.  Their lifecycle is short:
a guest is waiting (``待入座``), then either sits down (``已入座``) or the
booking is dropped (``已取消``).  Sitting down stamps ``check_in_time``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from tableorder.domain.exceptions import InvalidStatusError, ValidationError


class ReservationSource(Enum):
    BOOKING = "預訂"
    WALK_IN = "現場"


class ReservationStatus(Enum):
    PENDING = "待入座"
    SEATED = "已入座"
    CANCELLED = "已取消"

    @classmethod
    def parse(cls, label: str | ReservationStatus) -> ReservationStatus:
        if isinstance(label, cls):
            return label
        try:
            return cls(label)
        except ValueError:
            raise InvalidStatusError(
                f"Invalid status {label!r}. Must be: 待入座, 已入座, or 已取消",
                fields={"status": "must be 待入座, 已入座, or 已取消"},
            ) from None


# A seated party can still be cancelled; check_in_time is kept as history.
_RESERVATION_TRANSITIONS: dict[ReservationStatus, frozenset[ReservationStatus]] = {
    ReservationStatus.PENDING: frozenset(
        {ReservationStatus.SEATED, ReservationStatus.CANCELLED}
    ),
    ReservationStatus.SEATED: frozenset({ReservationStatus.CANCELLED}),
    ReservationStatus.CANCELLED: frozenset(),
}


@dataclass
class Reservation:
    """Aggregate root for table reservations.

    Invariant: ``check_in_time`` is set once the reservation has been
    seated and is never cleared afterwards.
    """

    id: str | None
    shop_id: str
    table_no: str
    time: str
    phone: str = ""
    source: ReservationSource = ReservationSource.WALK_IN
    status: ReservationStatus = ReservationStatus.PENDING
    check_in_time: datetime | None = None

    @staticmethod
    def create(
        shop_id: str,
        table_no: str,
        time: str,
        phone: str | None = None,
        source: str | ReservationSource | None = None,
        status: str | ReservationStatus | None = None,
        now: datetime | None = None,
    ) -> Reservation:
        """Create a reservation.

        Unrecognised ``source`` falls back to walk-in and unrecognised
        ``status`` falls back to waiting, matching what the front desk
        sends for ad-hoc entries.  A walk-in entered as already seated is
        checked in on the spot.
        """
        missing: dict[str, str] = {}
        if not shop_id or not shop_id.strip():
            missing["shopId"] = "required"
        if not table_no or not table_no.strip():
            missing["tableNo"] = "required"
        if not time or not time.strip():
            missing["time"] = "required"
        if missing:
            raise ValidationError(
                "shopId, tableNo, and time are required", fields=missing
            )

        initial = _status_or_default(status)
        return Reservation(
            id=None,
            shop_id=shop_id.strip(),
            table_no=table_no.strip(),
            time=time.strip(),
            phone=(phone or "").strip(),
            source=_source_or_default(source),
            status=initial,
            check_in_time=(
                (now or datetime.now(timezone.utc))
                if initial == ReservationStatus.SEATED
                else None
            ),
        )

    # --- State transitions ----------------------------------------------------

    def transition(
        self,
        new_status: str | ReservationStatus,
        now: datetime | None = None,
    ) -> None:
        """Move to *new_status*, stamping ``check_in_time`` when seated.

        Re-applying the current status changes nothing.
        """
        target = ReservationStatus.parse(new_status)
        if target == self.status:
            return
        if target not in _RESERVATION_TRANSITIONS[self.status]:
            raise InvalidStatusError(
                f"Cannot change reservation status from {self.status.value} "
                f"to {target.value}",
                fields={"status": f"not allowed from {self.status.value}"},
            )
        self.status = target
        if target == ReservationStatus.SEATED:
            self.check_in_time = now or datetime.now(timezone.utc)

    def check_in(self, now: datetime | None = None) -> None:
        self.transition(ReservationStatus.SEATED, now=now)

    def cancel(self) -> None:
        self.transition(ReservationStatus.CANCELLED)


def _source_or_default(source: str | ReservationSource | None) -> ReservationSource:
    if isinstance(source, ReservationSource):
        return source
    try:
        return ReservationSource(source)
    except ValueError:
        return ReservationSource.WALK_IN


def _status_or_default(status: str | ReservationStatus | None) -> ReservationStatus:
    if isinstance(status, ReservationStatus):
        return status
    try:
        return ReservationStatus(status)
    except ValueError:
        return ReservationStatus.PENDING
