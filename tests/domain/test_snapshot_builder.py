"""Unit tests for the SnapshotBuilder domain service."""

import pytest

from storefront.domain.exceptions import (
    DuplicateReferenceError,
    EntityNotFoundError,
    ValidationError,
)
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.service.snapshot_builder import SnapshotBuilder
from tests.catalog import MISSING, P1, P2, P3, TOYS, products
from tests.fakes import FakeProductRepository


def _setup() -> tuple[SnapshotBuilder, FakeProductRepository]:
    repo = FakeProductRepository(products())
    return SnapshotBuilder(repo), repo


class TestSnapshotHappyPath:

    def test_copies_name_and_price_in_input_order(self):
        builder, _ = _setup()
        snapshot = builder.build([(P2, 1), (P1, 2)])
        assert [(i.product_id, i.title, i.unit_price, i.quantity.value) for i in snapshot] == [
            (P2, "Gadget", Money.of("5.00"), 1),
            (P1, "Widget", Money.of("10.00"), 2),
        ]

    def test_single_bulk_lookup_for_all_items(self):
        builder, repo = _setup()
        builder.build([(P1, 1), (P2, 1), (P3, 1)])
        assert repo.bulk_lookups == [{P1, P2, P3}]

    def test_upper_case_ids_resolve(self):
        lettered = "ab" * 12
        repo = FakeProductRepository(
            [Product(id=lettered, name="Kite", price=Money.of("3.00"), category_id=TOYS)]
        )
        snapshot = SnapshotBuilder(repo).build([(lettered.upper(), 1)])
        assert snapshot[0].product_id == lettered

    def test_snapshot_does_not_follow_later_price_changes(self):
        builder, repo = _setup()
        snapshot = builder.build([(P1, 1)])

        widget = repo.get_by_id(P1)
        widget.update_price(Money.of("12.00"))
        widget.rename("Widget Pro")

        assert snapshot[0].unit_price == Money.of("10.00")
        assert snapshot[0].title == "Widget"

    def test_does_not_mutate_products(self):
        builder, repo = _setup()
        before = [(p.name, p.price, p.updated_at) for p in repo.list_all()]
        builder.build([(P1, 4)])
        assert [(p.name, p.price, p.updated_at) for p in repo.list_all()] == before


class TestSnapshotRejections:

    def test_empty_items_rejected(self):
        builder, _ = _setup()
        with pytest.raises(ValidationError, match="at least one item"):
            builder.build([])

    def test_duplicate_reported_at_second_occurrence(self):
        builder, repo = _setup()
        with pytest.raises(DuplicateReferenceError) as info:
            builder.build([(P1, 1), (P1, 3)])
        assert info.value.index == 1
        assert info.value.entity_id == P1
        assert repo.bulk_lookups == []

    def test_duplicate_detection_ignores_case(self):
        builder, _ = _setup()
        upper = "AB" * 12
        with pytest.raises(DuplicateReferenceError) as info:
            builder.build([(P2, 1), (upper.lower(), 1), (upper, 2)])
        assert info.value.index == 2

    def test_duplicate_wins_over_missing_product(self):
        builder, _ = _setup()
        with pytest.raises(DuplicateReferenceError):
            builder.build([(MISSING, 1), (MISSING, 1)])

    def test_first_missing_in_input_order_is_reported(self):
        builder, _ = _setup()
        other_missing = "ff" * 12
        with pytest.raises(EntityNotFoundError) as info:
            builder.build([(P1, 1), (other_missing, 1), (MISSING, 1)])
        assert info.value.entity_kind == "product"
        assert info.value.entity_id == other_missing
        assert "Product not found" in str(info.value)

    def test_malformed_id_rejected(self):
        builder, _ = _setup()
        with pytest.raises(ValidationError, match=r"Invalid items\[1\]\.productId format"):
            builder.build([(P1, 1), ("P2", 1)])

    def test_zero_quantity_rejected(self):
        builder, _ = _setup()
        with pytest.raises(ValidationError, match=">= 1"):
            builder.build([(P1, 0)])
