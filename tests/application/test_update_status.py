"""Integration tests for order and reservation status use cases."""

import pytest

from tableorder.application.create_order import CreateOrderHandler
from tableorder.application.create_reservation import CreateReservationHandler
from tableorder.application.dto import OrderItemSpec
from tableorder.application.list_reservations import ListReservationsHandler
from tableorder.application.show_reservation import ShowReservationHandler
from tableorder.application.update_order_status import UpdateOrderStatusHandler
from tableorder.application.update_reservation_status import (
    UpdateReservationStatusHandler,
)
from tableorder.domain.exceptions import InvalidStatusError, NotFoundError, ValidationError
from tableorder.domain.model.order import OrderStatus
from tableorder.domain.model.reservation import ReservationStatus
from tests.fakes import FakeOrderRepository, FakeReservationRepository


def _order_setup() -> tuple[UpdateOrderStatusHandler, FakeOrderRepository, str]:
    order_repo = FakeOrderRepository()
    dto = CreateOrderHandler(order_repo).handle(
        "shop-1", "A3", [OrderItemSpec(menu_item_id="m1", name="Rice", price=30, quantity=1)]
    )
    return UpdateOrderStatusHandler(order_repo), order_repo, dto.id


class TestOrderStatus:

    def test_serve_then_pay(self):
        handler, order_repo, order_id = _order_setup()
        assert handler.mark_served(order_id).status == "served"
        assert handler.mark_paid(order_id).status == "paid"
        assert order_repo.get_by_id(order_id).status == OrderStatus.PAID

    def test_status_label(self):
        handler, _, order_id = _order_setup()
        assert handler.handle(order_id, "served").status == "served"

    def test_bogus_status(self):
        handler, order_repo, order_id = _order_setup()
        with pytest.raises(InvalidStatusError):
            handler.handle(order_id, "bogus")
        assert order_repo.get_by_id(order_id).status == OrderStatus.NEW

    def test_regression_rejected_and_not_saved(self):
        handler, order_repo, order_id = _order_setup()
        handler.mark_served(order_id)
        handler.mark_paid(order_id)
        with pytest.raises(InvalidStatusError):
            handler.handle(order_id, "new")
        assert order_repo.get_by_id(order_id).status == OrderStatus.PAID

    def test_missing_order(self):
        handler, _, _ = _order_setup()
        with pytest.raises(NotFoundError):
            handler.mark_served("nope")


def _reservation_setup() -> tuple[FakeReservationRepository, str]:
    repo = FakeReservationRepository()
    dto = CreateReservationHandler(repo).handle(
        shop_id="shop-1", table_no="A3", time="2024-05-01 19:00", phone="0912", source="預訂"
    )
    return repo, dto.id


class TestCreateReservation:

    def test_create(self):
        repo, res_id = _reservation_setup()
        dto = ShowReservationHandler(repo).handle(res_id)
        assert dto.status == "待入座"
        assert dto.source == "預訂"
        assert dto.check_in_time is None

    def test_missing_time(self):
        repo = FakeReservationRepository()
        with pytest.raises(ValidationError, match="required"):
            CreateReservationHandler(repo).handle(shop_id="shop-1", table_no="A3", time="")

    def test_show_missing(self):
        repo, _ = _reservation_setup()
        with pytest.raises(NotFoundError, match="Reservation nope not found"):
            ShowReservationHandler(repo).handle("nope")


class TestReservationStatus:

    def test_check_in_persists_stamp(self):
        repo, res_id = _reservation_setup()
        dto = UpdateReservationStatusHandler(repo).check_in(res_id)
        assert dto.status == "已入座"
        assert dto.check_in_time is not None
        assert repo.get_by_id(res_id).check_in_time == dto.check_in_time

    def test_cancel(self):
        repo, res_id = _reservation_setup()
        dto = UpdateReservationStatusHandler(repo).cancel(res_id)
        assert dto.status == "已取消"
        assert dto.check_in_time is None

    def test_invalid_label(self):
        repo, res_id = _reservation_setup()
        with pytest.raises(InvalidStatusError):
            UpdateReservationStatusHandler(repo).handle(res_id, "done")

    def test_missing_reservation(self):
        repo, _ = _reservation_setup()
        with pytest.raises(NotFoundError):
            UpdateReservationStatusHandler(repo).check_in("nope")


class TestListReservations:

    def test_filter_and_order_by_time(self):
        repo = FakeReservationRepository()
        create = CreateReservationHandler(repo)
        create.handle(shop_id="shop-1", table_no="A1", time="2024-05-01 20:00")
        create.handle(shop_id="shop-1", table_no="A2", time="2024-05-01 18:30")
        create.handle(shop_id="shop-2", table_no="B1", time="2024-05-01 19:00")
        late = repo.find(shop_id="shop-1")[0]
        UpdateReservationStatusHandler(repo).cancel(late.id)

        dtos = ListReservationsHandler(repo).handle(shop_id="shop-1")
        assert [d.table_no for d in dtos] == ["A2", "A1"]

        pending = ListReservationsHandler(repo).handle(shop_id="shop-1", status="待入座")
        assert [d.table_no for d in pending] == ["A2"]
        assert repo.find(status=ReservationStatus.CANCELLED)[0].table_no == "A1"
