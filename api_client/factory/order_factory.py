from datetime import datetime
from typing import Any, Optional

from api_client.entity.order import Order, OrderIntent, OrderStatus, Payer
from api_client.exceptions import PayPalError
from api_client.factory.purchase_unit_factory import PurchaseUnitFactory
from api_client.factory.utils import ensure_object, require


class PayerFactory:
    """Maps a PayPal payer, or the payer data the checkout page collects
    (same shape), into a Payer."""

    def from_paypal_response(self, data: Optional[dict[str, Any]]) -> Optional[Payer]:
        if not data:
            return None
        data = ensure_object(data, "Payer")
        name = data.get("name") or {}
        return Payer(
            email_address=data.get("email_address", ""),
            payer_id=data.get("payer_id", ""),
            given_name=name.get("given_name", ""),
            surname=name.get("surname", ""),
        )


def _parse_time(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise PayPalError(f"Order response has an invalid time {value!r}.") from exc


class OrderFactory:
    def __init__(
        self,
        purchase_unit_factory: PurchaseUnitFactory,
        payer_factory: PayerFactory | None = None,
    ):
        self.purchase_unit_factory = purchase_unit_factory
        self.payer_factory = payer_factory or PayerFactory()

    def from_paypal_response(self, data: dict[str, Any]) -> Order:
        data = ensure_object(data, "Order")
        order_id = require(data, "id", "Order")
        purchase_units = require(data, "purchase_units", "Order")
        try:
            status = OrderStatus(data.get("status", OrderStatus.CREATED.value))
            intent = OrderIntent(data.get("intent", OrderIntent.CAPTURE.value))
        except ValueError as exc:
            raise PayPalError(f"Order {order_id} has an unknown status.") from exc

        return Order(
            id=order_id,
            purchase_units=[
                self.purchase_unit_factory.from_paypal_response(unit)
                for unit in purchase_units
            ],
            status=status,
            intent=intent,
            payer=self.payer_factory.from_paypal_response(data.get("payer")),
            create_time=_parse_time(data.get("create_time")),
            update_time=_parse_time(data.get("update_time")),
        )
