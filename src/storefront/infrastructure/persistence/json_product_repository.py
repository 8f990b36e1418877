"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def find_by_ids(self, product_ids: set[str]) -> list[Product]:
        # one file read for the whole set
        return [p for pid, p in self._load().items() if pid in product_ids]

    def list_by_category(self, category_id: str) -> list[Product]:
        return [p for p in self._load().values() if p.category_id == category_id]

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    def delete(self, product_id: str) -> bool:
        products = self._load()
        if products.pop(product_id, None) is None:
            return False
        self._persist(products)
        return True

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                price=Money(Decimal(item["price"]), item.get("currency", DEFAULT_CURRENCY)),
                category_id=item["category_id"],
                description=item.get("description", ""),
                is_active=item.get("is_active", True),
                created_at=datetime.fromisoformat(item["created_at"]),
                updated_at=datetime.fromisoformat(item["updated_at"]),
            )
            for item in self._file.load()
        }

    def _persist(self, products: dict[str, Product]) -> None:
        self._file.persist(
            [
                {
                    "id": p.id,
                    "name": p.name,
                    "description": p.description,
                    "price": str(p.price.amount),
                    "currency": p.price.currency,
                    "category_id": p.category_id,
                    "is_active": p.is_active,
                    "created_at": p.created_at.isoformat(),
                    "updated_at": p.updated_at.isoformat(),
                }
                for p in products.values()
            ]
        )
