"""One class per PayPal REST resource."""

from api_client.endpoint.order_endpoint import OrderEndpoint
from api_client.endpoint.payment_token_endpoint import PaymentTokenEndpoint
from api_client.endpoint.payments_endpoint import PaymentsEndpoint
from api_client.endpoint.request import PayPalEndpoint

__all__ = [
    "OrderEndpoint",
    "PayPalEndpoint",
    "PaymentTokenEndpoint",
    "PaymentsEndpoint",
]
