"""Application service: Show Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, to_order_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.value_objects import entity_id
from storefront.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> OrderDTO:
        order_id = entity_id(order_id, label="order id")
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("order", order_id)
        return to_order_dto(order)
