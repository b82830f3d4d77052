"""
Plain dataclass implementations of the commerce source protocols.

Used by the in-memory store that backs the checkout endpoint and by the tests.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional


@dataclass
class Address:
    first_name: str = ""
    last_name: str = ""
    company: str = ""
    address_1: str = ""
    address_2: str = ""
    city: str = ""
    state: str = ""
    postcode: str = ""
    country: str = ""


@dataclass
class LineItem:
    name: str
    quantity: int
    unit_price: Decimal
    unit_tax: Decimal = Decimal("0")
    sku: str = ""
    description: str = ""
    is_virtual: bool = False


@dataclass
class Fee:
    name: str
    amount: Decimal
    tax: Decimal = Decimal("0")


@dataclass
class Cart:
    currency: str
    line_items: list[LineItem] = field(default_factory=list)
    fees: list[Fee] = field(default_factory=list)
    shipping_total: Decimal = Decimal("0")
    shipping_tax: Decimal = Decimal("0")
    discount_total: Decimal = Decimal("0")
    total: Decimal = Decimal("0")


@dataclass
class Order(Cart):
    id: int = 0
    order_number: str = ""
    customer_id: int = 0
    payment_method: str = ""
    shipping_address: Optional[Address] = None
    billing_address: Optional[Address] = None
    meta: dict[str, Any] = field(default_factory=dict)

    def get_meta(self, key: str, default: Any = None) -> Any:
        return self.meta.get(key, default)


@dataclass
class Customer:
    id: int
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    shipping_address: Optional[Address] = None
    billing_address: Optional[Address] = None


@dataclass
class Session:
    customer: Optional[Customer] = None


@dataclass
class Subscription:
    id: int
    customer_id: int
    payment_method: str = ""
    related_order_count: int = 1
    parent: Optional[Order] = None
    meta: dict[str, Any] = field(default_factory=dict)
    saved: int = 0

    def get_meta(self, key: str, default: Any = None) -> Any:
        return self.meta.get(key, default)

    def update_meta_data(self, key: str, value: Any) -> None:
        self.meta[key] = value

    def save(self) -> None:
        self.saved += 1


@dataclass
class InMemoryStore:
    """Current cart and session plus the orders and subscriptions by id."""

    current_cart: Optional[Cart] = None
    current_session: Session = field(default_factory=Session)
    orders: dict[int, Order] = field(default_factory=dict)
    subscriptions: dict[int, Subscription] = field(default_factory=dict)

    def cart(self) -> Optional[Cart]:
        return self.current_cart

    def session(self) -> Session:
        return self.current_session

    def order(self, order_id: int) -> Optional[Order]:
        return self.orders.get(order_id)

    def subscription(self, subscription_id: int) -> Optional[Subscription]:
        return self.subscriptions.get(subscription_id)
