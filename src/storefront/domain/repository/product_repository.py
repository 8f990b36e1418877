"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def find_by_ids(self, product_ids: set[str]) -> list[Product]:
        """Return every product whose ID is in *product_ids*, in one lookup.

        Missing IDs are simply absent from the result; order is unspecified.
        """

    @abstractmethod
    def list_by_category(self, category_id: str) -> list[Product]:
        """Return every product that references *category_id*."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Remove a product. Returns False if it did not exist.

        Orders keep their line-item snapshots; nothing cascades.
        """
