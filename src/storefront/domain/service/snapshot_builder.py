"""Domain service: Snapshot Builder.

Turns ``(product_id, quantity)`` references into immutable line-item
snapshots of the catalog as it is right now.

All products are fetched with one bulk lookup, so the outcome does not
depend on how many items were requested or on the store's iteration
order: when several references are missing, the first one in input order
is reported.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from storefront.domain.exceptions import (
    DuplicateReferenceError,
    EntityNotFoundError,
    ValidationError,
)
from storefront.domain.model.order import OrderLineItem
from storefront.domain.model.value_objects import Quantity, entity_id
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class SnapshotBuilder:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def build(self, items: Sequence[tuple[object, object]]) -> list[OrderLineItem]:
        """Resolve every reference and copy name and price by value.

        Either every item resolves and the full snapshot is returned, or an
        exception is raised and nothing is returned.
        """
        if not items:
            raise ValidationError("Order must contain at least one item")

        # Phase 1: syntactic checks and duplicate detection, in input order
        refs: list[tuple[str, Quantity]] = []
        seen: set[str] = set()
        for index, (raw_id, raw_qty) in enumerate(items):
            product_id = entity_id(raw_id, label=f"items[{index}].productId")
            quantity = Quantity(raw_qty)  # type: ignore[arg-type]
            if product_id in seen:
                raise DuplicateReferenceError(index, product_id)
            seen.add(product_id)
            refs.append((product_id, quantity))

        # Phase 2: one bulk lookup for the whole set
        found = {p.id.lower(): p for p in self._product_repo.find_by_ids(seen)}
        logger.debug("Resolved %d of %d referenced products", len(found), len(seen))

        for product_id, _ in refs:
            if product_id not in found:
                raise EntityNotFoundError("product", product_id)

        # Phase 3: copy by value
        return [
            OrderLineItem(
                product_id=product_id,
                title=found[product_id].name,
                unit_price=found[product_id].price,
                quantity=quantity,
            )
            for product_id, quantity in refs
        ]
