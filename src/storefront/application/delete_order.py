"""Application service: Delete Order use case.

Deleting an order has no effect on products or categories.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.value_objects import entity_id
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> None:
        order_id = entity_id(order_id, label="order id")
        if not self._order_repo.delete(order_id):
            raise EntityNotFoundError("order", order_id)
        logger.info("Deleted order %s", order_id)
