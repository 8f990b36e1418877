"""Order pricing: the authoritative total of a snapshot."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from storefront.domain.exceptions import InternalConsistencyFault
from storefront.domain.model.order import OrderLineItem
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money


def compute_total(line_items: Iterable[OrderLineItem]) -> Money:
    """Sum ``unit_price * quantity`` over snapshot values only.

    An empty snapshot totals zero. A negative sum or mixed currencies can
    only come from a broken upstream invariant and raise
    ``InternalConsistencyFault`` instead of being corrected.
    """
    amount = Decimal("0.00")
    currency: str | None = None
    for item in line_items:
        if currency is None:
            currency = item.unit_price.currency
        elif item.unit_price.currency != currency:
            raise InternalConsistencyFault(
                f"Snapshot mixes currencies {currency} and {item.unit_price.currency}"
            )
        amount += item.unit_price.amount * item.quantity.value

    if amount < 0:
        raise InternalConsistencyFault(f"Order total computed as negative ({amount})")
    return Money(amount, currency or DEFAULT_CURRENCY)
