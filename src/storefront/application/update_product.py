"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, entity_id
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        price: str | None = None,
        description: str | None = None,
        active: bool | None = None,
    ) -> Product:
        """Update any subset of a product's mutable fields.

        This does NOT affect any existing orders — they captured a
        name and price snapshot when they were materialized.
        """
        product_id = entity_id(product_id, label="product id")
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("product", product_id)

        if name is not None:
            product.rename(name)
        if price is not None:
            product.update_price(Money.of(price))
        if description is not None:
            product.describe(description)
        if active is not None:
            product.set_active(active)

        self._product_repo.save(product)
        logger.info("Updated product %s", product.id)
        return product
