from typing import Any, Optional

from api_client.entity.shipping import Shipping
from api_client.factory.address_factory import AddressFactory
from woocommerce.sources import WcAddress, WcCustomer, WcOrder


def _full_name(address: Optional[WcAddress]) -> str:
    if address is None:
        return ""
    return f"{address.first_name} {address.last_name}".strip()


def _is_empty(address: Optional[WcAddress]) -> bool:
    return address is None or not (address.country or address.postcode)


class ShippingFactory:
    def __init__(self, address_factory: AddressFactory | None = None):
        self.address_factory = address_factory or AddressFactory()

    def from_wc_customer(
        self, customer: WcCustomer, use_billing_fallback: bool = False
    ) -> Shipping:
        source = customer.shipping_address
        if use_billing_fallback and _is_empty(source):
            source = customer.billing_address
        return Shipping(
            name=_full_name(source),
            address=self.address_factory.from_wc_address(source),
        )

    def from_wc_order(self, order: WcOrder) -> Shipping:
        return Shipping(
            name=_full_name(order.shipping_address),
            address=self.address_factory.from_wc_order(order),
        )

    def from_paypal_response(self, data: dict[str, Any]) -> Shipping:
        address = None
        if data.get("address"):
            address = self.address_factory.from_paypal_response(data["address"])
        return Shipping(
            name=(data.get("name") or {}).get("full_name", ""),
            address=address,
        )
