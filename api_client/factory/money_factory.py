from decimal import InvalidOperation
from typing import Any

from api_client.entity.money import Money
from api_client.exceptions import PayPalError
from api_client.factory.utils import require


class MoneyFactory:
    def from_paypal_response(self, data: dict[str, Any]) -> Money:
        value = require(data, "value", "Money")
        currency_code = require(data, "currency_code", "Money")
        try:
            return Money(value, currency_code)
        except (InvalidOperation, ValueError) as exc:
            raise PayPalError(f"Money response is not valid: {data!r}") from exc
