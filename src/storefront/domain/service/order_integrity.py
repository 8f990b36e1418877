"""Domain service: Order Integrity Validator.

Everything an order needs before it may be persisted, checked in a fixed
order so that a request with several problems always reports the same one:

  1. the referenced user exists
  2. item references are well-formed and unique
  3. every referenced product exists
  4. the total is computed from the snapshot

Validation happens entirely in memory; nothing is written here.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from storefront.domain.exceptions import EntityNotFoundError, InternalConsistencyFault
from storefront.domain.model.order import OrderLineItem
from storefront.domain.model.value_objects import Money, entity_id
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.pricing import compute_total
from storefront.domain.service.snapshot_builder import SnapshotBuilder


@dataclass(frozen=True)
class MaterializedOrder:
    """Trusted output: snapshot items plus the total derived from them."""

    user_id: str
    items: list[OrderLineItem]
    total: Money


class OrderIntegrityValidator:

    def __init__(
        self,
        user_repo: UserRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._user_repo = user_repo
        self._snapshots = SnapshotBuilder(product_repo)

    def materialize(
        self,
        user_id: str,
        items: Sequence[tuple[object, object]],
    ) -> MaterializedOrder:
        user_id = entity_id(user_id, label="userId")
        if self._user_repo.get_by_id(user_id) is None:
            raise EntityNotFoundError("user", user_id)

        snapshot = self._snapshots.build(items)
        if len(snapshot) != len(items):
            raise InternalConsistencyFault(
                f"Snapshot has {len(snapshot)} items for {len(items)} requested"
            )

        return MaterializedOrder(
            user_id=user_id,
            items=snapshot,
            total=compute_total(snapshot),
        )
