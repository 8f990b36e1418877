"""Application service: Update Order use case.

An update is a full re-materialization: the user is checked again and
every item is re-snapshotted against the catalog as it is *now*. Previous
line items are never reused, even when the same products are submitted.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, OrderItemSpec, to_order_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.value_objects import entity_id
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.order_integrity import OrderIntegrityValidator

logger = logging.getLogger(__name__)


class UpdateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        user_repo: UserRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._validator = OrderIntegrityValidator(user_repo, product_repo)

    def handle(
        self,
        order_id: str,
        user_id: str,
        item_specs: list[OrderItemSpec],
        status: str | None = None,
        note: str | None = None,
    ) -> OrderDTO:
        """Replace an order's user and items; keep status/note unless given."""
        parsed_status = OrderStatus.parse(status) if status is not None else None

        order_id = entity_id(order_id, label="order id")
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("order", order_id)

        materialized = self._validator.materialize(
            user_id, [(s.product_id, s.quantity) for s in item_specs]
        )
        order.revise(
            user_id=materialized.user_id,
            items=materialized.items,
            total=materialized.total,
            status=parsed_status,
            note=note,
        )
        self._order_repo.replace(order)

        logger.info("Updated order %s (total %s)", order.id, order.total)
        return to_order_dto(order)
