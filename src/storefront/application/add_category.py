"""Application service: Add Category use case."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.category import Category
from storefront.domain.model.value_objects import new_entity_id
from storefront.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class AddCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, name: str) -> Category:
        if not name or not name.strip():
            raise ValidationError("Category name is required")

        category = Category(id=new_entity_id(), name=name.strip())
        self._category_repo.save(category)
        logger.info("Added category %s '%s'", category.id, category.name)
        return category
