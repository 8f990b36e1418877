"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, entity_id, new_entity_id
from storefront.domain.repository.category_repository import CategoryRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    def handle(
        self,
        name: str,
        price: str,
        category_id: str,
        description: str = "",
    ) -> Product:
        """Add a new product to the catalog under an existing category."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        category_id = entity_id(category_id, label="category id")
        if self._category_repo.get_by_id(category_id) is None:
            raise EntityNotFoundError("category", category_id)

        product = Product(
            id=new_entity_id(),
            name=name.strip(),
            price=Money.of(price),
            category_id=category_id,
            description=description.strip(),
        )
        self._product_repo.save(product)
        logger.info("Added product %s '%s' at %s", product.id, product.name, product.price)
        return product
