"""Integration tests for the UpdateOrder use case."""

import pytest

from storefront.application.create_order import CreateOrderHandler
from storefront.application.update_order import UpdateOrderHandler
from storefront.domain.exceptions import DuplicateReferenceError, EntityNotFoundError
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.value_objects import Money
from tests.catalog import ALICE, BOB, MISSING, P1, P2, P3, products, spec, users
from tests.fakes import FakeOrderRepository, FakeProductRepository, FakeUserRepository


def _setup():
    order_repo = FakeOrderRepository()
    user_repo = FakeUserRepository(users())
    product_repo = FakeProductRepository(products())
    create = CreateOrderHandler(order_repo, user_repo, product_repo)
    update = UpdateOrderHandler(order_repo, user_repo, product_repo)
    dto = create.handle(
        ALICE, [spec(P1, 2), spec(P2, 1)], status="paid", note="first"
    )
    return update, order_repo, product_repo, dto.id


class TestUpdateOrderHappyPath:

    def test_replaces_items_and_recomputes_total(self):
        update, order_repo, _, order_id = _setup()
        dto = update.handle(order_id, BOB, [spec(P3, 4)])
        assert dto.user_id == BOB
        assert dto.total == "$10.00"

        saved = order_repo.get_by_id(order_id)
        assert [i.product_id for i in saved.items] == [P3]
        assert order_repo.replace_calls == 1

    def test_resnapshots_against_current_prices(self):
        update, order_repo, product_repo, order_id = _setup()

        widget = product_repo.get_by_id(P1)
        widget.update_price(Money.of("12.00"))
        widget.rename("Widget v2")

        update.handle(order_id, ALICE, [spec(P1, 2), spec(P2, 1)])

        saved = order_repo.get_by_id(order_id)
        assert saved.items[0].unit_price == Money.of("12.00")
        assert saved.items[0].title == "Widget v2"
        assert saved.total == Money.of("29.00")

    def test_omitted_status_and_note_are_retained(self):
        update, order_repo, _, order_id = _setup()
        update.handle(order_id, ALICE, [spec(P1, 1)])
        saved = order_repo.get_by_id(order_id)
        assert saved.status == OrderStatus.PAID
        assert saved.note == "first"

    def test_given_status_and_note_overwrite(self):
        update, order_repo, _, order_id = _setup()
        update.handle(order_id, ALICE, [spec(P1, 1)], status="shipped", note="second")
        saved = order_repo.get_by_id(order_id)
        assert saved.status == OrderStatus.SHIPPED
        assert saved.note == "second"


class TestUpdateOrderValidation:

    def test_missing_order_reported_before_missing_user(self):
        update, _, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Order not found"):
            update.handle(MISSING, MISSING, [spec(MISSING, 1)])

    def test_missing_user_reported_before_item_problems(self):
        update, _, _, order_id = _setup()
        with pytest.raises(EntityNotFoundError, match="User not found"):
            update.handle(order_id, MISSING, [spec(P1, 1), spec(P1, 1)])

    def test_rejected_update_leaves_order_untouched(self):
        update, order_repo, _, order_id = _setup()
        with pytest.raises(DuplicateReferenceError):
            update.handle(order_id, BOB, [spec(P3, 1), spec(P3, 2)])

        saved = order_repo.get_by_id(order_id)
        assert saved.user_id == ALICE
        assert saved.total == Money.of("25.00")
        assert order_repo.replace_calls == 0

    def test_missing_product_rejected(self):
        update, order_repo, _, order_id = _setup()
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            update.handle(order_id, ALICE, [spec(P1, 1), spec(MISSING, 1)])
        assert order_repo.get_by_id(order_id).total == Money.of("25.00")
