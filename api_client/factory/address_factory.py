from typing import Any, Optional

from api_client.entity.shipping import Address
from api_client.factory.utils import require
from woocommerce.sources import WcAddress, WcCustomer, WcOrder


class AddressFactory:
    def from_wc_address(self, address: Optional[WcAddress]) -> Optional[Address]:
        if address is None:
            return None
        return Address(
            country_code=address.country,
            address_line_1=address.address_1,
            address_line_2=address.address_2,
            admin_area_1=address.state,
            admin_area_2=address.city,
            postal_code=address.postcode,
        )

    def from_wc_customer(
        self, customer: WcCustomer, address_type: str = "shipping"
    ) -> Optional[Address]:
        source = (
            customer.billing_address
            if address_type == "billing"
            else customer.shipping_address
        )
        return self.from_wc_address(source)

    def from_wc_order(self, order: WcOrder) -> Optional[Address]:
        return self.from_wc_address(order.shipping_address)

    def from_paypal_response(self, data: dict[str, Any]) -> Address:
        return Address(
            country_code=require(data, "country_code", "Address"),
            address_line_1=data.get("address_line_1", ""),
            address_line_2=data.get("address_line_2", ""),
            admin_area_1=data.get("admin_area_1", ""),
            admin_area_2=data.get("admin_area_2", ""),
            postal_code=data.get("postal_code", ""),
        )
