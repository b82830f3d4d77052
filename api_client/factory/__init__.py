"""Mappers from commerce objects and PayPal JSON into entities."""

from api_client.factory.address_factory import AddressFactory
from api_client.factory.amount_factory import AmountFactory
from api_client.factory.error_response_collection_factory import (
    ErrorResponseCollectionFactory,
)
from api_client.factory.item_factory import ItemFactory
from api_client.factory.money_factory import MoneyFactory
from api_client.factory.order_factory import OrderFactory, PayerFactory
from api_client.factory.patch_collection_factory import PatchCollectionFactory
from api_client.factory.payment_token_factory import PaymentTokenFactory
from api_client.factory.payments_factory import (
    AuthorizationsFactory,
    CaptureFactory,
    PaymentsFactory,
    RefundFactory,
)
from api_client.factory.purchase_unit_factory import PurchaseUnitFactory
from api_client.factory.shipping_factory import ShippingFactory

__all__ = [
    "AddressFactory",
    "AmountFactory",
    "AuthorizationsFactory",
    "CaptureFactory",
    "ErrorResponseCollectionFactory",
    "ItemFactory",
    "MoneyFactory",
    "OrderFactory",
    "PatchCollectionFactory",
    "PayerFactory",
    "PaymentTokenFactory",
    "PaymentsFactory",
    "PurchaseUnitFactory",
    "RefundFactory",
    "ShippingFactory",
]
