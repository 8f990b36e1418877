"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are added and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root — it is the entry point for any
    operation involving a product. Kept as a mutable dataclass because
    name and price updates are legitimate mutations on the aggregate.
    """

    id: str
    name: str
    price: Money
    category_id: str
    description: str = ""
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        self.name = name.strip()
        self._touch()

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        self.price = new_price
        self._touch()

    def describe(self, description: str) -> None:
        self.description = description.strip()
        self._touch()

    def set_active(self, active: bool) -> None:
        self.is_active = active
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
