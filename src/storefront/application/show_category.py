"""Application service: Show Category use case (query)."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.category import Category
from storefront.domain.model.value_objects import entity_id
from storefront.domain.repository.category_repository import CategoryRepository


class ShowCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, category_id: str) -> Category:
        category_id = entity_id(category_id, label="category id")
        category = self._category_repo.get_by_id(category_id)
        if category is None:
            raise EntityNotFoundError("category", category_id)
        return category
