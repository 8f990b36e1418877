"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.

Input models hold references and quantities only. Prices, titles and
totals are derived server-side, so the input shapes have no field for
them at all; a client that echoes them back has them dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import MAX_NOTE_LENGTH, Order

logger = logging.getLogger(__name__)

ENTITY_ID_PATTERN = r"^[a-fA-F0-9]{24}$"

OrderStatusName = Literal["pending", "paid", "shipped", "cancelled"]


def _drop_derived(data: Any, fields: tuple[str, ...], where: str) -> Any:
    if not isinstance(data, dict):
        return data
    dropped = [name for name in fields if name in data]
    if dropped:
        logger.warning(
            "Ignoring client-supplied derived field(s) in %s: %s",
            where,
            ", ".join(dropped),
        )
        data = {k: v for k, v in data.items() if k not in dropped}
    return data


class OrderItemSpec(BaseModel):
    """Input: what the customer asked for (product reference + quantity)."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    product_id: str = Field(alias="productId", pattern=ENTITY_ID_PATTERN)
    quantity: int = Field(ge=1)

    @model_validator(mode="before")
    @classmethod
    def _ignore_snapshot_fields(cls, data: Any) -> Any:
        return _drop_derived(data, ("title", "unitPrice"), "order item")

    @field_validator("quantity", mode="before")
    @classmethod
    def _json_number(cls, value: Any) -> Any:
        # JSON has one number type: 2.0 is an integer, "2" and true are not
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("quantity must be a number")
        return value


class OrderRequest(BaseModel):
    """Input: a whole create/update order request."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    user_id: str = Field(alias="userId", pattern=ENTITY_ID_PATTERN)
    items: list[OrderItemSpec] = Field(min_length=1)
    status: OrderStatusName | None = None
    note: str | None = Field(default=None, max_length=MAX_NOTE_LENGTH)

    @model_validator(mode="before")
    @classmethod
    def _ignore_total(cls, data: Any) -> Any:
        return _drop_derived(data, ("total",), "order")

    @classmethod
    def from_payload(cls, payload: object) -> OrderRequest:
        """Parse an untrusted JSON-shaped request body.

        Schema violations surface as the domain ``ValidationError`` so
        callers only ever handle ``DomainException``.
        """
        try:
            return cls.model_validate(payload)
        except pydantic.ValidationError as exc:
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'request'}: {err['msg']}"
                for err in exc.errors()
            )
            raise ValidationError(f"Invalid order request: {details}") from exc


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_id: str
    title: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    user_id: str
    status: str
    items: list[OrderLineItemDTO]
    total: str
    note: str | None
    created_at: str
    updated_at: str


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        user_id=order.user_id,
        status=order.status.value,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                title=item.title,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total),
        note=order.note,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        updated_at=order.updated_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
