"""Tests for the JSON-file repositories, using a temporary directory."""

import json

from storefront.domain.model.order import Order, OrderLineItem, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity
from storefront.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)
from tests.catalog import ALICE, MISSING, P1, P2, P3, TOOLS, TOYS, categories, products, users


class TestJsonProductRepository:

    def test_bulk_lookup_skips_missing(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        for p in products():
            repo.save(p)
        found = repo.find_by_ids({P1, P3, MISSING})
        assert sorted(p.id for p in found) == sorted([P1, P3])

    def test_round_trips_price_and_category(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(products()[0])
        loaded = repo.get_by_id(P1)
        assert loaded.price == Money.of("10.00")
        assert loaded.category_id == TOOLS

    def test_list_by_category(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        for p in products():
            repo.save(p)
        assert [p.id for p in repo.list_by_category(TOYS)] == [P3]

    def test_delete_reports_whether_anything_was_removed(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        for p in products():
            repo.save(p)
        assert repo.delete(P2) is True
        assert repo.delete(P2) is False
        assert sorted(p.id for p in repo.list_all()) == sorted([P1, P3])


class TestJsonCategoryRepository:

    def test_delete_reports_whether_anything_was_removed(self, tmp_path):
        repo = JsonCategoryRepository(tmp_path / "categories.json")
        for c in categories():
            repo.save(c)
        assert repo.delete(TOYS) is True
        assert repo.delete(TOYS) is False
        assert [c.id for c in repo.list_all()] == [TOOLS]


class TestJsonUserRepository:

    def test_email_lookup_is_case_insensitive(self, tmp_path):
        repo = JsonUserRepository(tmp_path / "users.json")
        for u in users():
            repo.save(u)
        assert repo.get_by_email("ALICE@EXAMPLE.COM").id == ALICE

    def test_delete(self, tmp_path):
        repo = JsonUserRepository(tmp_path / "users.json")
        for u in users():
            repo.save(u)
        assert repo.delete(ALICE) is True
        assert repo.get_by_id(ALICE) is None
        assert repo.delete(ALICE) is False


class TestJsonOrderRepository:

    def _order(self) -> Order:
        items = [
            OrderLineItem(P1, "Widget", Money.of("10.00"), Quantity(2)),
            OrderLineItem(P2, "Gadget", Money.of("5.00"), Quantity(1)),
        ]
        return Order.create(ALICE, items, Money.of("25.00"), note="ring twice")

    def test_add_assigns_id_and_stores_snapshot_inline(self, tmp_path):
        path = tmp_path / "orders.json"
        repo = JsonOrderRepository(path)
        order = self._order()
        repo.add(order)

        assert order.id is not None
        raw = json.loads(path.read_text(encoding="utf-8"))[0]
        assert raw["total"] == "25.00"
        assert raw["items"][0] == {
            "product_id": P1,
            "title": "Widget",
            "quantity": 2,
            "unit_price": "10.00",
            "currency": "USD",
        }

    def test_replace_and_reload(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = self._order()
        repo.add(order)

        order.revise(ALICE, order.items[:1], Money.of("20.00"), status=OrderStatus.SHIPPED)
        repo.replace(order)

        loaded = repo.get_by_id(order.id)
        assert loaded.status == OrderStatus.SHIPPED
        assert loaded.total == Money.of("20.00")
        assert loaded.note == "ring twice"
        assert len(loaded.items) == 1

    def test_delete(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = self._order()
        repo.add(order)
        assert repo.delete(order.id) is True
        assert repo.get_by_id(order.id) is None
