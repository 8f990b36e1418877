"""Application service: List Products use case (query)."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import entity_id
from storefront.domain.repository.category_repository import CategoryRepository
from storefront.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    def handle(self, category_id: str | None = None) -> list[Product]:
        """Return every product, or only those in an existing category."""
        if category_id is None:
            return self._product_repo.list_all()

        category_id = entity_id(category_id, label="category id")
        if self._category_repo.get_by_id(category_id) is None:
            raise EntityNotFoundError("category", category_id)
        return self._product_repo.list_by_category(category_id)
