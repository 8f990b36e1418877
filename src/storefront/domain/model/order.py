"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items. Line items are
value copies of catalog data taken when the order was materialized;
they never point back at the live Product.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    SHIPPED = "shipped"
    CANCELLED = "cancelled"

    @staticmethod
    def parse(raw: str) -> OrderStatus:
        try:
            return OrderStatus(raw.strip().lower())
        except (AttributeError, ValueError) as exc:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(
                f"Invalid order status {raw!r} (expected one of: {allowed})"
            ) from exc


@dataclass(frozen=True)
class OrderLineItem:
    """Price and name snapshot of a product at materialization time.

    ``product_id`` is kept for traceability only and is never resolved
    again once the item is written.
    """

    product_id: str
    title: str
    unit_price: Money  # locked at snapshot time
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_NOTE_LENGTH = 500


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Use the ``Order.create()`` factory for new orders and ``revise()`` for
    updates. ``total`` is always supplied by the integrity validator; the
    ``__init__`` is intentionally simple so the repository can
    reconstitute persisted orders without re-validating.
    """

    id: str | None
    user_id: str
    items: list[OrderLineItem]
    total: Money
    status: OrderStatus = OrderStatus.PENDING
    note: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        user_id: str,
        items: list[OrderLineItem],
        total: Money,
        status: OrderStatus | None = None,
        note: str | None = None,
    ) -> Order:
        """Create a new order from a materialized snapshot."""
        _check_items(items)
        return Order(
            id=None,
            user_id=user_id,
            items=list(items),
            total=total,
            status=status or OrderStatus.PENDING,
            note=_clean_note(note),
        )

    # --- Mutation -------------------------------------------------------------

    def revise(
        self,
        user_id: str,
        items: list[OrderLineItem],
        total: Money,
        status: OrderStatus | None = None,
        note: str | None = None,
    ) -> None:
        """Replace user and items with a freshly materialized snapshot.

        ``status`` and ``note`` keep their stored values when omitted.
        """
        _check_items(items)
        self.user_id = user_id
        self.items = list(items)
        self.total = total
        if status is not None:
            self.status = status
        if note is not None:
            self.note = _clean_note(note)
        self.updated_at = datetime.now(timezone.utc)


def _check_items(items: list[OrderLineItem]) -> None:
    if not items:
        raise ValidationError("Order must contain at least one item")


def _clean_note(note: str | None) -> str | None:
    if note is None:
        return None
    note = note.strip()
    if len(note) > MAX_NOTE_LENGTH:
        raise ValidationError(f"Note must be at most {MAX_NOTE_LENGTH} characters")
    return note or None
