"""Application service: Delete Category use case.

The dependency check runs before the existence check. A category that
does not exist has no dependents, so its caller sees "not found".
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import DependentEntitiesExistError, EntityNotFoundError
from storefront.domain.model.value_objects import entity_id
from storefront.domain.repository.category_repository import CategoryRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.deletion_guard import CategoryDeletionGuard

logger = logging.getLogger(__name__)


class DeleteCategoryHandler:

    def __init__(
        self,
        category_repo: CategoryRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._category_repo = category_repo
        self._guard = CategoryDeletionGuard(product_repo)

    def handle(self, category_id: str) -> None:
        category_id = entity_id(category_id, label="category id")

        try:
            self._guard.ensure_deletable(category_id)
        except DependentEntitiesExistError as exc:
            logger.warning("Refused to delete category %s: %s", category_id, exc)
            raise

        if not self._category_repo.delete(category_id):
            raise EntityNotFoundError("category", category_id)
        logger.info("Deleted category %s", category_id)
