"""
Orders endpoint (``v2/checkout/orders``).

Success codes: create 201, get 200, capture 201, authorize 201, patch 204.
Failures raise PayPalApiError carrying PayPal's message and issue details.
"""

from typing import Any, Callable, Optional, Sequence

import structlog

from api_client.entity.order import Order, OrderIntent, OrderStatus, Payer
from api_client.entity.payment_token import PaymentToken
from api_client.entity.purchase_unit import PurchaseUnit
from api_client.endpoint.request import PayPalEndpoint
from api_client.exceptions import PayPalApiError
from api_client.factory.order_factory import OrderFactory
from api_client.factory.patch_collection_factory import PatchCollectionFactory

log = structlog.get_logger(__name__)

SHIPPING_PREFERENCE_SET_PROVIDED_ADDRESS = "SET_PROVIDED_ADDRESS"
SHIPPING_PREFERENCE_GET_FROM_FILE = "GET_FROM_FILE"
SHIPPING_PREFERENCE_NO_SHIPPING = "NO_SHIPPING"

BodyFilter = Callable[[dict[str, Any]], dict[str, Any]]


class OrderEndpoint(PayPalEndpoint):
    def __init__(
        self,
        host,
        bearer,
        order_factory: OrderFactory,
        patch_collection_factory: PatchCollectionFactory | None = None,
        error_response_factory=None,
        intent: str = OrderIntent.CAPTURE.value,
        session=None,
        timeout: float = 30.0,
    ):
        super().__init__(host, bearer, error_response_factory, session, timeout)
        self.order_factory = order_factory
        self.patch_collection_factory = (
            patch_collection_factory or PatchCollectionFactory()
        )
        self.intent = OrderIntent(intent)

    @staticmethod
    def shipping_preference(purchase_units: Sequence[PurchaseUnit]) -> str:
        if purchase_units and all(u.shipping is not None for u in purchase_units):
            return SHIPPING_PREFERENCE_SET_PROVIDED_ADDRESS
        return SHIPPING_PREFERENCE_GET_FROM_FILE

    def create(
        self,
        purchase_units: Sequence[PurchaseUnit],
        payer: Optional[Payer] = None,
        payment_token: Optional[PaymentToken] = None,
        bn_code: str = "",
        shipping_preference: Optional[str] = None,
        request_id: str = "",
        body_filters: Sequence[BodyFilter] = (),
    ) -> Order:
        """Create a PayPal order for the given purchase units.

        body_filters get the request body right before it is sent and return
        the body to send, e.g. to swap the payment source for a renewal.
        """
        fail = "Could not create order."
        data: dict[str, Any] = {
            "intent": self.intent.value,
            "purchase_units": [unit.to_dict() for unit in purchase_units],
            "application_context": {
                "shipping_preference": shipping_preference
                or self.shipping_preference(purchase_units),
            },
        }
        if payer is not None and payer.to_dict():
            data["payer"] = payer.to_dict()
        if payment_token is not None:
            data["payment_source"] = {
                "token": {"id": payment_token.id, "type": payment_token.type}
            }
        for body_filter in body_filters:
            data = body_filter(data)

        headers = {}
        if bn_code:
            headers["PayPal-Partner-Attribution-Id"] = bn_code
        if request_id:
            headers["PayPal-Request-Id"] = request_id

        response = self.send(
            "POST", "checkout/orders", fail, json_body=data, extra_headers=headers
        )
        if response.status_code != 201:
            raise self.error_exception(response, fail)
        return self.order_factory.from_paypal_response(self.decode(response, fail))

    def order(self, order_id: str) -> Order:
        fail = "Could not retrieve order."
        response = self.send("GET", f"checkout/orders/{order_id}", fail)
        if response.status_code != 200:
            raise self.error_exception(response, fail)
        return self.order_factory.from_paypal_response(self.decode(response, fail))

    def capture(self, order: Order) -> Order:
        if order.status == OrderStatus.COMPLETED:
            return order
        return self._settle(order, "capture", "ORDER_ALREADY_CAPTURED")

    def authorize(self, order: Order) -> Order:
        return self._settle(order, "authorize", "ORDER_ALREADY_AUTHORIZED")

    def _settle(self, order: Order, action: str, already_done_issue: str) -> Order:
        fail = f"Could not {action} order."
        response = self.send("POST", f"checkout/orders/{order.id}/{action}", fail)
        if response.status_code != 201:
            error = self.error_exception(response, fail)
            if isinstance(error, PayPalApiError) and error.has_issue(already_done_issue):
                log.info("paypal.order_already_settled", order_id=order.id, action=action)
                return self.order(order.id)
            raise error
        return self.order_factory.from_paypal_response(self.decode(response, fail))

    def patch_order_with(self, order_to_update: Order, order_to_compare: Order) -> Order:
        """Bring the PayPal order in line with the local one."""
        patches = self.patch_collection_factory.from_orders(
            order_to_update, order_to_compare
        )
        if not len(patches):
            return order_to_update

        fail = "Could not update order."
        response = self.send(
            "PATCH",
            f"checkout/orders/{order_to_update.id}",
            fail,
            json_body=patches.to_list(),
        )
        if response.status_code != 204:
            raise self.error_exception(response, fail)
        return self.order(order_to_update.id)
