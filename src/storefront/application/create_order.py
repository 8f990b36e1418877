"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
The integrity validator does every check in memory; the order is then
written with a single ``add`` call, so a rejected request leaves no
trace in the store.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, OrderItemSpec, to_order_dto
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.order_integrity import OrderIntegrityValidator

logger = logging.getLogger(__name__)


class CreateOrderHandler:

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
        user_id: str,
        item_specs: list[OrderItemSpec],
        status: str | None = None,
        note: str | None = None,
    ) -> OrderDTO:
        """Create a new order.

        Steps:
        1. Check the user exists.
        2. Snapshot every referenced product at its *current* name and price.
        3. Compute the total from the snapshot.
        4. Persist and return a DTO.
        """
        parsed_status = OrderStatus.parse(status) if status is not None else None

        materialized = self._validator.materialize(
            user_id, [(s.product_id, s.quantity) for s in item_specs]
        )
        order = Order.create(
            user_id=materialized.user_id,
            items=materialized.items,
            total=materialized.total,
            status=parsed_status,
            note=note,
        )
        self._order_repo.add(order)

        logger.info(
            "Created order %s for user %s (%d items, total %s)",
            order.id, order.user_id, len(order.items), order.total,
        )
        return to_order_dto(order)
