"""Integration tests for the add/update/remove adjustment use cases."""

import pytest

from tableorder.application.add_adjustment import AddAdjustmentHandler
from tableorder.application.create_order import CreateOrderHandler
from tableorder.application.dto import AdjustmentInput, AdjustmentPatch, OrderItemSpec
from tableorder.application.remove_adjustment import RemoveAdjustmentHandler
from tableorder.application.update_adjustment import UpdateAdjustmentHandler
from tableorder.domain.exceptions import NotFoundError, ValidationError
from tests.fakes import FakeOrderRepository

SERVICE_FEE = AdjustmentInput(name="Service fee", type="surcharge", value_type="percentage", value=10)
COUPON = AdjustmentInput(name="Coupon", type="discount", value_type="fixed", value=20)


def _setup() -> tuple[FakeOrderRepository, str]:
    """Repo holding one order of 2 x $150."""
    order_repo = FakeOrderRepository()
    dto = CreateOrderHandler(order_repo).handle(
        "shop-1",
        "A3",
        [OrderItemSpec(menu_item_id="m1", name="Beef Noodles", price=150, quantity=2)],
    )
    return order_repo, dto.id


class TestAddAdjustment:

    def test_add_persists_new_total(self):
        order_repo, order_id = _setup()
        dto = AddAdjustmentHandler(order_repo).handle(order_id, SERVICE_FEE)
        assert dto.total_price == 330
        saved = order_repo.get_by_id(order_id)
        assert saved.total_price == 330
        assert len(saved.adjustments) == 1

    def test_missing_order(self):
        order_repo, _ = _setup()
        with pytest.raises(NotFoundError, match="Order nope not found"):
            AddAdjustmentHandler(order_repo).handle("nope", SERVICE_FEE)

    def test_bad_value_type_not_persisted(self):
        order_repo, order_id = _setup()
        bad = AdjustmentInput(name="x", type="discount", value_type="ratio", value=1)
        with pytest.raises(ValidationError, match="Invalid value type"):
            AddAdjustmentHandler(order_repo).handle(order_id, bad)
        assert order_repo.get_by_id(order_id).adjustments == []


class TestUpdateAdjustment:

    def test_partial_update(self):
        order_repo, order_id = _setup()
        dto = AddAdjustmentHandler(order_repo).handle(order_id, SERVICE_FEE)
        adj_id = dto.adjustments[0].id

        dto = UpdateAdjustmentHandler(order_repo).handle(
            order_id, adj_id, AdjustmentPatch(value=5)
        )
        assert dto.adjustments[0].amount == 15
        assert dto.adjustments[0].name == "Service fee"
        assert dto.total_price == 315
        assert order_repo.get_by_id(order_id).total_price == 315

    def test_type_label_parsed(self):
        order_repo, order_id = _setup()
        dto = AddAdjustmentHandler(order_repo).handle(order_id, SERVICE_FEE)
        adj_id = dto.adjustments[0].id

        dto = UpdateAdjustmentHandler(order_repo).handle(
            order_id, adj_id, AdjustmentPatch(type="discount")
        )
        assert dto.adjustments[0].amount == -30
        assert dto.total_price == 270

    def test_missing_adjustment(self):
        order_repo, order_id = _setup()
        with pytest.raises(NotFoundError, match="Adjustment 'nope' not found"):
            UpdateAdjustmentHandler(order_repo).handle(order_id, "nope", AdjustmentPatch(value=1))

    def test_missing_order(self):
        order_repo, _ = _setup()
        with pytest.raises(NotFoundError, match="Order nope not found"):
            UpdateAdjustmentHandler(order_repo).handle("nope", "a", AdjustmentPatch(value=1))

    def test_failed_update_not_persisted(self):
        order_repo, order_id = _setup()
        dto = AddAdjustmentHandler(order_repo).handle(order_id, SERVICE_FEE)
        adj_id = dto.adjustments[0].id
        with pytest.raises(ValidationError):
            UpdateAdjustmentHandler(order_repo).handle(order_id, adj_id, AdjustmentPatch(value=-1))
        saved = order_repo.get_by_id(order_id)
        assert saved.adjustments[0].value == 10
        assert saved.total_price == 330


class TestRemoveAdjustment:

    def test_remove(self):
        order_repo, order_id = _setup()
        dto = AddAdjustmentHandler(order_repo).handle(order_id, COUPON)
        dto = RemoveAdjustmentHandler(order_repo).handle(order_id, dto.adjustments[0].id)
        assert dto.adjustments == []
        assert dto.total_price == 300

    def test_missing_adjustment(self):
        order_repo, order_id = _setup()
        with pytest.raises(NotFoundError):
            RemoveAdjustmentHandler(order_repo).handle(order_id, "nope")


class TestPricingScenario:

    def test_surcharge_discount_then_remove_surcharge(self):
        order_repo, order_id = _setup()
        add = AddAdjustmentHandler(order_repo)

        dto = add.handle(order_id, SERVICE_FEE)
        fee_id = dto.adjustments[0].id
        assert dto.adjustments[0].amount == 30
        assert dto.total_price == 330

        dto = add.handle(order_id, COUPON)
        assert dto.total_price == 310

        dto = RemoveAdjustmentHandler(order_repo).handle(order_id, fee_id)
        assert dto.total_price == 280
        assert [a.name for a in dto.adjustments] == ["Coupon"]
