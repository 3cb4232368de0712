"""Unit tests for the Reservation aggregate and its status machine."""

from datetime import datetime, timedelta, timezone

import pytest

from tableorder.domain.exceptions import InvalidStatusError, ValidationError
from tableorder.domain.model.reservation import (
    Reservation,
    ReservationSource,
    ReservationStatus,
)

NOW = datetime(2024, 5, 1, 19, 5, tzinfo=timezone.utc)


def _make_reservation(**overrides) -> Reservation:
    fields = dict(shop_id="shop-1", table_no="A3", time="2024-05-01 19:00", phone="0912")
    fields.update(overrides)
    return Reservation.create(**fields)


class TestReservationCreation:

    def test_defaults(self):
        r = _make_reservation()
        assert r.id is None
        assert r.status == ReservationStatus.PENDING
        assert r.source == ReservationSource.WALK_IN
        assert r.check_in_time is None

    def test_booking_source(self):
        r = _make_reservation(source="預訂")
        assert r.source == ReservationSource.BOOKING

    def test_unknown_source_falls_back_to_walk_in(self):
        r = _make_reservation(source="phone")
        assert r.source == ReservationSource.WALK_IN

    def test_unknown_status_falls_back_to_pending(self):
        r = _make_reservation(status="whatever")
        assert r.status == ReservationStatus.PENDING

    def test_missing_phone_becomes_empty(self):
        r = _make_reservation(phone=None)
        assert r.phone == ""

    def test_created_seated_is_checked_in(self):
        r = _make_reservation(status="已入座", now=NOW)
        assert r.status == ReservationStatus.SEATED
        assert r.check_in_time == NOW

    def test_required_fields(self):
        with pytest.raises(ValidationError, match="time are required") as exc_info:
            _make_reservation(shop_id="", time=" ")
        assert set(exc_info.value.fields) == {"shopId", "time"}


class TestCheckIn:

    def test_check_in_stamps_time(self):
        r = _make_reservation()
        r.check_in(now=NOW)
        assert r.status == ReservationStatus.SEATED
        assert r.check_in_time == NOW

    def test_check_in_defaults_to_current_time(self):
        r = _make_reservation()
        before = datetime.now(timezone.utc)
        r.transition("已入座")
        assert r.check_in_time is not None
        assert r.check_in_time >= before

    def test_repeat_check_in_keeps_first_stamp(self):
        r = _make_reservation()
        r.check_in(now=NOW)
        r.check_in(now=NOW + timedelta(minutes=10))
        assert r.check_in_time == NOW


class TestCancel:

    def test_cancel_never_sets_check_in(self):
        r = _make_reservation()
        r.cancel()
        assert r.status == ReservationStatus.CANCELLED
        assert r.check_in_time is None

    def test_cancel_after_check_in_keeps_stamp(self):
        r = _make_reservation()
        r.check_in(now=NOW)
        r.cancel()
        assert r.status == ReservationStatus.CANCELLED
        assert r.check_in_time == NOW

    def test_cancelled_is_terminal(self):
        r = _make_reservation()
        r.cancel()
        with pytest.raises(InvalidStatusError, match="from 已取消 to 已入座"):
            r.check_in()
        assert r.check_in_time is None


class TestRejectedTransitions:

    def test_unknown_label(self):
        r = _make_reservation()
        with pytest.raises(InvalidStatusError, match="Invalid status"):
            r.transition("seated")

    def test_seated_cannot_go_back_to_pending(self):
        r = _make_reservation()
        r.check_in(now=NOW)
        with pytest.raises(InvalidStatusError):
            r.transition("待入座")
        assert r.status == ReservationStatus.SEATED
