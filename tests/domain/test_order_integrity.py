"""Unit tests for the OrderIntegrityValidator domain service."""

import pytest

from storefront.domain.exceptions import (
    DuplicateReferenceError,
    EntityNotFoundError,
    ValidationError,
)
from storefront.domain.model.value_objects import Money
from storefront.domain.service.order_integrity import OrderIntegrityValidator
from tests.catalog import ALICE, MISSING, P1, P2, products, users
from tests.fakes import FakeProductRepository, FakeUserRepository


def _validator() -> OrderIntegrityValidator:
    return OrderIntegrityValidator(
        FakeUserRepository(users()), FakeProductRepository(products())
    )


class TestMaterialize:

    def test_builds_snapshot_and_total(self):
        result = _validator().materialize(ALICE, [(P1, 2), (P2, 1)])
        assert result.user_id == ALICE
        assert result.total == Money.of("25.00")
        assert [i.unit_price for i in result.items] == [Money.of("10.00"), Money.of("5.00")]

    def test_user_id_is_normalized(self):
        result = _validator().materialize(ALICE.upper(), [(P1, 1)])
        assert result.user_id == ALICE


class TestCheckOrdering:

    def test_unknown_user_reported_before_item_problems(self):
        with pytest.raises(EntityNotFoundError) as info:
            _validator().materialize(MISSING, [(P1, 1), (P1, 1)])
        assert info.value.entity_kind == "user"
        assert "User not found" in str(info.value)

    def test_duplicates_reported_before_missing_products(self):
        with pytest.raises(DuplicateReferenceError):
            _validator().materialize(ALICE, [(MISSING, 1), (P1, 1), (P1, 2)])

    def test_missing_product(self):
        with pytest.raises(EntityNotFoundError) as info:
            _validator().materialize(ALICE, [(P1, 1), (MISSING, 1)])
        assert info.value.entity_kind == "product"

    def test_malformed_user_id(self):
        with pytest.raises(ValidationError, match="Invalid userId format"):
            _validator().materialize("nobody", [(P1, 1)])
