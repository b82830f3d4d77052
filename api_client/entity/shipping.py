from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Address:
    country_code: str
    address_line_1: str = ""
    address_line_2: str = ""
    admin_area_1: str = ""
    admin_area_2: str = ""
    postal_code: str = ""

    def is_usable(self) -> bool:
        """PayPal needs at least a country and a postal code to ship to."""
        return bool(self.country_code) and bool(self.postal_code)

    def to_dict(self) -> dict[str, str]:
        address = {"country_code": self.country_code}
        for key in (
            "address_line_1",
            "address_line_2",
            "admin_area_1",
            "admin_area_2",
            "postal_code",
        ):
            value = getattr(self, key)
            if value:
                address[key] = value
        return address


@dataclass(frozen=True)
class Shipping:
    name: str = ""
    address: Optional[Address] = None

    def to_dict(self) -> dict[str, Any]:
        shipping: dict[str, Any] = {}
        if self.name:
            shipping["name"] = {"full_name": self.name}
        if self.address is not None:
            shipping["address"] = self.address.to_dict()
        return shipping
