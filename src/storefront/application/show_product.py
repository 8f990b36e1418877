"""Application service: Show Product use case (query)."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import entity_id
from storefront.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> Product:
        product_id = entity_id(product_id, label="product id")
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("product", product_id)
        return product
