"""Category aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError


@dataclass
class Category:
    """A product grouping.

    Deletion is only allowed while no product references the category;
    that rule spans two aggregates and lives in ``CategoryDeletionGuard``.
    """

    id: str
    name: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Category name is required")
        self.name = name.strip()
        self.updated_at = datetime.now(timezone.utc)
