"""Domain service: Category Deletion Guard.

A category may only be removed while no product references it. The
store itself does not enforce this, so every deletion path goes through
the guard first.
"""

from __future__ import annotations

from storefront.domain.exceptions import DependentEntitiesExistError
from storefront.domain.repository.product_repository import ProductRepository


class CategoryDeletionGuard:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def ensure_deletable(self, category_id: str) -> None:
        """Raise DependentEntitiesExistError if any product uses the category."""
        dependents = self._product_repo.list_by_category(category_id)
        if dependents:
            raise DependentEntitiesExistError(category_id, len(dependents))
