"""Unit tests for the order status machine."""

import pytest

from tableorder.domain.exceptions import InvalidStatusError, ValidationError
from tableorder.domain.model.order import Order, OrderItem, OrderStatus
from tableorder.domain.model.value_objects import Price, Quantity


def _new_order() -> Order:
    item = OrderItem(menu_item_id="m1", name="Rice", price=Price(30), quantity=Quantity(1))
    return Order.create("shop-1", "B1", [item])


class TestForwardTransitions:

    def test_new_to_served(self):
        order = _new_order()
        order.transition("served")
        assert order.status == OrderStatus.SERVED

    def test_served_to_paid(self):
        order = _new_order()
        order.mark_served()
        order.mark_paid()
        assert order.status == OrderStatus.PAID

    def test_accepts_enum_member(self):
        order = _new_order()
        order.transition(OrderStatus.SERVED)
        assert order.status == OrderStatus.SERVED

    def test_same_status_is_noop(self):
        order = _new_order()
        order.mark_served()
        order.mark_served()
        assert order.status == OrderStatus.SERVED

    def test_only_status_changes(self):
        order = _new_order()
        before = (order.subtotal, order.total_price, order.created_at, list(order.items))
        order.mark_served()
        assert (order.subtotal, order.total_price, order.created_at, list(order.items)) == before


class TestRejectedTransitions:

    def test_unknown_label(self):
        order = _new_order()
        with pytest.raises(InvalidStatusError, match="Must be: new, served, or paid"):
            order.transition("bogus")
        assert order.status == OrderStatus.NEW

    def test_invalid_status_is_a_validation_error(self):
        order = _new_order()
        with pytest.raises(ValidationError):
            order.transition("cooking")

    def test_skipping_served_rejected(self):
        order = _new_order()
        with pytest.raises(InvalidStatusError, match="from new to paid"):
            order.mark_paid()

    def test_paid_is_terminal(self):
        order = _new_order()
        order.mark_served()
        order.mark_paid()
        for target in ("new", "served"):
            with pytest.raises(InvalidStatusError):
                order.transition(target)
        assert order.status == OrderStatus.PAID

    def test_served_cannot_go_back_to_new(self):
        order = _new_order()
        order.mark_served()
        with pytest.raises(InvalidStatusError, match="from served to new"):
            order.transition("new")
