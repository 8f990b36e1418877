"""JSON-file-backed implementation of CategoryRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from storefront.domain.model.category import Category
from storefront.domain.repository.category_repository import CategoryRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, category_id: str) -> Category | None:
        for raw in self._file.load():
            if raw["id"] == category_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Category]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, category: Category) -> None:
        self._file.upsert(
            {
                "id": category.id,
                "name": category.name,
                "created_at": category.created_at.isoformat(),
                "updated_at": category.updated_at.isoformat(),
            }
        )

    def delete(self, category_id: str) -> bool:
        return self._file.remove(category_id)

    @staticmethod
    def _to_domain(raw: dict) -> Category:
        return Category(
            id=raw["id"],
            name=raw["name"],
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
