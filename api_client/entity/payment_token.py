"""Vaulted payment methods (PayPal accounts and cards) stored for later charges."""

from dataclasses import dataclass
from typing import Any, Optional, Union

PAYMENT_METHOD_TOKEN = "PAYMENT_METHOD_TOKEN"


@dataclass(frozen=True)
class PayPalSource:
    email_address: str = ""
    payer_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "paypal": {
                "payer": {"email_address": self.email_address},
                "payer_id": self.payer_id,
            }
        }


@dataclass(frozen=True)
class CardSource:
    brand: str = ""
    last_digits: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"card": {"brand": self.brand, "last_digits": self.last_digits}}


PaymentSource = Union[PayPalSource, CardSource]


@dataclass(frozen=True)
class PaymentToken:
    id: str
    type: str = PAYMENT_METHOD_TOKEN
    source: Optional[PaymentSource] = None

    def is_paypal(self) -> bool:
        return isinstance(self.source, PayPalSource)

    def is_card(self) -> bool:
        return isinstance(self.source, CardSource)

    def to_dict(self) -> dict[str, Any]:
        token: dict[str, Any] = {"id": self.id, "type": self.type}
        if self.source is not None:
            token["source"] = self.source.to_dict()
        return token
