"""
Purchase unit factory.

Maps a commerce order or cart to the single purchase unit we send to PayPal,
and maps a purchase unit from a PayPal order response back.
"""

from typing import Any, Optional

from api_client.entity.item import Item
from api_client.entity.purchase_unit import PurchaseUnit
from api_client.entity.shipping import Shipping
from api_client.exceptions import PayPalError
from api_client.factory.amount_factory import AmountFactory
from api_client.factory.item_factory import ItemFactory
from api_client.factory.payments_factory import PaymentsFactory
from api_client.factory.shipping_factory import ShippingFactory
from woocommerce.sources import CheckoutSession, WcCart, WcOrder

DEFAULT_REFERENCE_ID = "default"
INVOICE_PREFIX = "WC-"


def _without_discounts(items: list[Item]) -> list[Item]:
    # Negative fees are discounts; they live in the amount breakdown instead
    return [item for item in items if not item.unit_amount.is_negative()]


def _usable_shipping(shipping: Optional[Shipping]) -> Optional[Shipping]:
    if shipping is None:
        return None
    address = shipping.address
    if address is None or not address.country_code or not address.postal_code:
        return None
    return shipping


class PurchaseUnitFactory:
    def __init__(
        self,
        amount_factory: AmountFactory,
        item_factory: ItemFactory,
        shipping_factory: ShippingFactory,
        payments_factory: PaymentsFactory,
    ):
        self.amount_factory = amount_factory
        self.item_factory = item_factory
        self.shipping_factory = shipping_factory
        self.payments_factory = payments_factory

    def from_wc_order(self, order: WcOrder) -> PurchaseUnit:
        return PurchaseUnit(
            reference_id=DEFAULT_REFERENCE_ID,
            amount=self.amount_factory.from_wc_order(order),
            items=_without_discounts(self.item_factory.from_wc_order(order)),
            shipping=_usable_shipping(self.shipping_factory.from_wc_order(order)),
            custom_id=str(order.id),
            invoice_id=f"{INVOICE_PREFIX}{order.order_number}",
        )

    def from_wc_cart(self, cart: WcCart, session: CheckoutSession) -> PurchaseUnit:
        """Build the unit for a cart that has no order yet.

        Without a known customer there is no address to ship to, so shipping
        is left out and PayPal collects it from the payer.
        """
        shipping = None
        customer = session.customer if session is not None else None
        if customer is not None:
            shipping = _usable_shipping(
                self.shipping_factory.from_wc_customer(customer, False)
            )

        return PurchaseUnit(
            reference_id=DEFAULT_REFERENCE_ID,
            amount=self.amount_factory.from_wc_cart(cart),
            items=_without_discounts(self.item_factory.from_wc_cart(cart)),
            shipping=shipping,
        )

    def from_paypal_response(self, data: dict[str, Any]) -> PurchaseUnit:
        if not isinstance(data, dict) or not data.get("reference_id"):
            raise PayPalError("No reference ID given.")

        shipping = None
        if data.get("shipping"):
            shipping = self.shipping_factory.from_paypal_response(data["shipping"])

        payments = None
        if data.get("payments") is not None:
            payments = self.payments_factory.from_paypal_response(data["payments"])

        return PurchaseUnit(
            reference_id=data["reference_id"],
            amount=self.amount_factory.from_paypal_response(data.get("amount")),
            items=[
                self.item_factory.from_paypal_response(item)
                for item in data.get("items") or []
            ],
            shipping=shipping,
            description=data.get("description", ""),
            custom_id=data.get("custom_id", ""),
            invoice_id=data.get("invoice_id", ""),
            soft_descriptor=data.get("soft_descriptor", ""),
            payments=payments,
        )
