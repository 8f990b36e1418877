"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Insert a new order, assigning its ID."""

    @abstractmethod
    def replace(self, order: Order) -> None:
        """Overwrite the stored copy of an existing order."""

    @abstractmethod
    def delete(self, order_id: str) -> bool:
        """Remove an order. Returns False if it did not exist."""
