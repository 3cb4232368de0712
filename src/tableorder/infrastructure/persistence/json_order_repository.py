"""JSON-file-backed implementation of OrderRepository.

Records use the camelCase field names of the wire format so the data
files stay interchangeable with what the HTTP API returns.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from uuid import uuid4

from tableorder.domain.model.adjustment import (
    AdjustmentType,
    AdjustmentValueType,
    Number,
    OrderAdjustment,
)
from tableorder.domain.model.order import Order, OrderItem, OrderStatus
from tableorder.domain.model.value_objects import Price, Quantity
from tableorder.domain.repository.order_repository import OrderRepository
from tableorder.infrastructure.persistence.json_collection import JsonCollection
from tableorder.infrastructure.serialization import from_millis, to_millis


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path)

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> str:
        return str(uuid4())

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._collection.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def find(
        self,
        shop_id: str | None = None,
        guest_id: str | None = None,
        status: OrderStatus | None = None,
    ) -> list[Order]:
        result: list[Order] = []
        for raw in self._collection.load():
            if shop_id is not None and raw["shopId"] != shop_id:
                continue
            if guest_id is not None and raw.get("guestId") != guest_id:
                continue
            if status is not None and raw["status"] != status.value:
                continue
            result.append(self._to_domain(raw))
        return result

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self.next_id()
        self._collection.upsert(self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        raw = {
            "id": order.id,
            "shopId": order.shop_id,
            "tableNo": order.table_no,
            "items": [
                {
                    "menuItemId": item.menu_item_id,
                    "name": item.name,
                    "price": item.price.value,
                    "quantity": item.quantity.value,
                    **({"skuId": item.sku_id} if item.sku_id else {}),
                }
                for item in order.items
            ],
            "adjustments": [
                {
                    "id": a.id,
                    "name": a.name,
                    "type": a.type.value,
                    "valueType": a.value_type.value,
                    "value": _plain_number(a.value),
                    "amount": a.amount,
                }
                for a in order.adjustments
            ],
            "subtotal": order.subtotal,
            "totalPrice": order.total_price,
            "status": order.status.value,
            "createdAt": to_millis(order.created_at),
        }
        if order.guest_id:
            raw["guestId"] = order.guest_id
        if order.guest_name:
            raw["guestName"] = order.guest_name
        return raw

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderItem(
                menu_item_id=i["menuItemId"],
                name=i["name"],
                price=Price(i["price"]),
                quantity=Quantity(i["quantity"]),
                sku_id=i.get("skuId"),
            )
            for i in raw["items"]
        ]
        adjustments = [
            OrderAdjustment(
                id=a["id"],
                name=a["name"],
                type=AdjustmentType(a["type"]),
                value_type=AdjustmentValueType(a["valueType"]),
                value=a["value"],
                amount=a["amount"],
            )
            for a in raw.get("adjustments") or []
        ]
        subtotal = raw.get("subtotal")
        if subtotal is None:
            # Early records only stored totalPrice.
            subtotal = sum(item.line_total for item in items)
        return Order(
            id=raw["id"],
            shop_id=raw["shopId"],
            table_no=raw["tableNo"],
            items=items,
            adjustments=adjustments,
            subtotal=subtotal,
            total_price=raw.get("totalPrice", subtotal),
            status=OrderStatus(raw["status"]),
            guest_id=raw.get("guestId"),
            guest_name=raw.get("guestName"),
            created_at=from_millis(raw["createdAt"]),
        )


def _plain_number(value: Number) -> int | float:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return value
