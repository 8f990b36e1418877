"""Application service: Delete Product use case.

Orders that reference the product are left alone: their line items are
value copies and never look the product up again.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.value_objects import entity_id
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        product_id = entity_id(product_id, label="product id")
        if not self._product_repo.delete(product_id):
            raise EntityNotFoundError("product", product_id)
        logger.info("Deleted product %s", product_id)
