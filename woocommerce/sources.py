"""
Read-only views of the commerce platform's orders, carts and customers.

The factories only ever read through these protocols, so any store that can
expose these fields can be mapped to PayPal without touching the mapping code.
Monetary fields are decimals in the store currency; unit prices exclude tax.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class WcAddress(Protocol):
    first_name: str
    last_name: str
    company: str
    address_1: str
    address_2: str
    city: str
    state: str
    postcode: str
    country: str


@runtime_checkable
class WcLineItem(Protocol):
    name: str
    quantity: int
    unit_price: Decimal
    unit_tax: Decimal
    sku: str
    description: str
    is_virtual: bool


@runtime_checkable
class WcFee(Protocol):
    """A cart fee; a negative amount is a discount."""

    name: str
    amount: Decimal
    tax: Decimal


class _Totals(Protocol):
    currency: str
    line_items: Sequence[WcLineItem]
    fees: Sequence[WcFee]
    shipping_total: Decimal
    shipping_tax: Decimal
    discount_total: Decimal
    total: Decimal


@runtime_checkable
class WcOrder(_Totals, Protocol):
    id: int
    order_number: str
    customer_id: int
    payment_method: str
    shipping_address: Optional[WcAddress]
    billing_address: Optional[WcAddress]

    def get_meta(self, key: str, default: Any = None) -> Any: ...


@runtime_checkable
class WcCart(_Totals, Protocol):
    """An in-progress cart; it has no id until checkout creates an order."""


@runtime_checkable
class WcCustomer(Protocol):
    id: int
    email: str
    first_name: str
    last_name: str
    shipping_address: Optional[WcAddress]
    billing_address: Optional[WcAddress]


@runtime_checkable
class CheckoutSession(Protocol):
    """The shopper behind the current request; customer is None for guests
    whose details are not known yet."""

    customer: Optional[WcCustomer]


@runtime_checkable
class WcSubscription(Protocol):
    id: int
    customer_id: int
    payment_method: str
    related_order_count: int
    parent: Optional[WcOrder]

    def get_meta(self, key: str, default: Any = None) -> Any: ...

    def update_meta_data(self, key: str, value: Any) -> None: ...

    def save(self) -> None: ...
