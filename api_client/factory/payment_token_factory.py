from typing import Any

from api_client.entity.payment_token import (
    PAYMENT_METHOD_TOKEN,
    CardSource,
    PaymentSource,
    PaymentToken,
    PayPalSource,
)
from api_client.factory.utils import ensure_object, require


class PaymentTokenFactory:
    def from_paypal_response(self, data: dict[str, Any]) -> PaymentToken:
        data = ensure_object(data, "Payment token")
        return PaymentToken(
            id=require(data, "id", "Payment token"),
            type=data.get("type", PAYMENT_METHOD_TOKEN),
            source=self._source(data.get("source") or {}),
        )

    @staticmethod
    def _source(data: dict[str, Any]) -> PaymentSource | None:
        if "paypal" in data:
            paypal = data["paypal"] or {}
            return PayPalSource(
                email_address=(paypal.get("payer") or {}).get("email_address", "")
                or paypal.get("email_address", ""),
                payer_id=paypal.get("payer_id", ""),
            )
        if "card" in data:
            card = data["card"] or {}
            return CardSource(
                brand=card.get("brand", ""),
                last_digits=card.get("last_digits", ""),
            )
        return None
