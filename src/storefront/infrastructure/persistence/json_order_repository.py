"""JSON-file-backed implementation of OrderRepository.

Line items are stored inline as plain values; loading an order never
consults the product catalog.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order, OrderLineItem, OrderStatus
from storefront.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    Money,
    Quantity,
    new_entity_id,
)
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._file.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def add(self, order: Order) -> None:
        order.id = new_entity_id()
        orders = self._file.load()
        orders.append(self._to_raw(order))
        self._file.persist(orders)

    def replace(self, order: Order) -> None:
        orders = self._file.load()
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                break
        else:
            raise EntityNotFoundError("order", order.id)
        self._file.persist(orders)

    def delete(self, order_id: str) -> bool:
        return self._file.remove(order_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "status": order.status.value,
            "note": order.note,
            "total": str(order.total.amount),
            "currency": order.total.currency,
            "created_at": order.created_at.isoformat(),
            "updated_at": order.updated_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "title": item.title,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderLineItem(
                product_id=i["product_id"],
                title=i["title"],
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", DEFAULT_CURRENCY)),
                quantity=Quantity(i["quantity"]),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            items=items,
            total=Money(Decimal(raw["total"]), raw.get("currency", DEFAULT_CURRENCY)),
            status=OrderStatus(raw["status"]),
            note=raw.get("note"),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
