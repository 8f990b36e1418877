"""Integration tests for showing, listing and deleting orders."""

import pytest

from storefront.application.create_order import CreateOrderHandler
from storefront.application.delete_order import DeleteOrderHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.domain.exceptions import EntityNotFoundError
from tests.catalog import ALICE, BOB, MISSING, P1, P2, TOOLS, products, spec, users
from tests.fakes import FakeOrderRepository, FakeProductRepository, FakeUserRepository


def _setup():
    order_repo = FakeOrderRepository()
    product_repo = FakeProductRepository(products())
    create = CreateOrderHandler(order_repo, FakeUserRepository(users()), product_repo)
    return create, order_repo, product_repo


class TestShowOrder:

    def test_shows_snapshot(self):
        create, order_repo, _ = _setup()
        dto = create.handle(ALICE, [spec(P1, 1)])
        shown = ShowOrderHandler(order_repo).handle(dto.id.upper())
        assert shown == dto

    def test_unknown_order(self):
        _, order_repo, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Order not found"):
            ShowOrderHandler(order_repo).handle(MISSING)


class TestListOrders:

    def test_newest_first(self):
        create, order_repo, _ = _setup()
        first = create.handle(ALICE, [spec(P1, 1)])
        second = create.handle(BOB, [spec(P2, 1)])
        order_repo.get_by_id(first.id).created_at = order_repo.get_by_id(
            second.id
        ).created_at.replace(year=2000)

        ids = [dto.id for dto in ListOrdersHandler(order_repo).handle()]
        assert ids == [second.id, first.id]


class TestDeleteOrder:

    def test_deletes_without_touching_catalog(self):
        create, order_repo, product_repo = _setup()
        dto = create.handle(ALICE, [spec(P1, 1)])

        DeleteOrderHandler(order_repo).handle(dto.id)

        assert order_repo.get_by_id(dto.id) is None
        assert len(product_repo.list_by_category(TOOLS)) == 2

    def test_unknown_order(self):
        _, order_repo, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            DeleteOrderHandler(order_repo).handle(MISSING)


class TestDeletedProductSnapshot:

    def test_order_outlives_deleted_product(self):
        create, order_repo, product_repo = _setup()
        dto = create.handle(ALICE, [spec(P1, 2), spec(P2, 1)])

        DeleteProductHandler(product_repo).handle(P1)

        shown = ShowOrderHandler(order_repo).handle(dto.id)
        assert shown == dto
        assert shown.items[0].title == "Widget"
        assert shown.items[0].unit_price == "$10.00"
        assert shown.total == "$25.00"
        assert ListOrdersHandler(order_repo).handle() == [dto]
