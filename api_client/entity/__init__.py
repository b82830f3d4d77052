"""
Typed representations of PayPal REST resources.

All entities are frozen dataclasses built once by a factory and serialized
with ``to_dict()`` into the JSON shape PayPal expects.
"""

from api_client.entity.amount import Amount, AmountBreakdown
from api_client.entity.error_response import (
    ErrorDetail,
    ErrorResponse,
    ErrorResponseCollection,
)
from api_client.entity.item import DIGITAL_GOODS, PHYSICAL_GOODS, Item
from api_client.entity.money import Money
from api_client.entity.order import Order, OrderIntent, OrderStatus, Payer
from api_client.entity.patch import Patch, PatchCollection
from api_client.entity.payment_token import (
    PAYMENT_METHOD_TOKEN,
    CardSource,
    PaymentToken,
    PayPalSource,
)
from api_client.entity.payments import (
    Authorization,
    AuthorizationStatus,
    Capture,
    CaptureStatus,
    Payments,
    Refund,
    RefundStatus,
)
from api_client.entity.purchase_unit import PurchaseUnit
from api_client.entity.shipping import Address, Shipping
from api_client.entity.token import Token

__all__ = [
    "Address",
    "Amount",
    "AmountBreakdown",
    "Authorization",
    "AuthorizationStatus",
    "Capture",
    "CaptureStatus",
    "CardSource",
    "DIGITAL_GOODS",
    "ErrorDetail",
    "ErrorResponse",
    "ErrorResponseCollection",
    "Item",
    "Money",
    "Order",
    "OrderIntent",
    "OrderStatus",
    "PAYMENT_METHOD_TOKEN",
    "PHYSICAL_GOODS",
    "Patch",
    "PatchCollection",
    "Payer",
    "PaymentToken",
    "Payments",
    "PayPalSource",
    "PurchaseUnit",
    "Refund",
    "RefundStatus",
    "Shipping",
    "Token",
]
