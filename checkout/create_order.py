"""
Backend side of the checkout button's createOrder callback.

Builds the purchase unit from the shopper's cart (or the stored order on the
pay-for-order page), creates the PayPal order and answers in the
``{success, data}`` envelope the checkout script expects.
"""

import html
from typing import Any, Optional

import structlog

from api.schemas import CreateOrderError, CreateOrderRequest, ErrorDetail
from api_client.endpoint.order_endpoint import OrderEndpoint
from api_client.entity.payment_token import PaymentToken
from api_client.exceptions import PayPalApiError, PayPalError
from api_client.factory.order_factory import PayerFactory
from api_client.factory.purchase_unit_factory import PurchaseUnitFactory
from checkout.nonce import verify_nonce
from core.logging import BusinessEvents
from core.settings import Settings
from subscriptions.helper import SubscriptionHelper
from vaulting.payment_token_repository import PaymentTokenRepository
from woocommerce.models import InMemoryStore

log = structlog.get_logger(__name__)

PAY_NOW_CONTEXT = "pay-now"
CHECKOUT_CONTEXT = "checkout"

# Form fields carrying the id of a vaulted payment method
SAVED_TOKEN_FIELDS = ("saved_credit_card", "saved_paypal_payment")


def error_response(message: str, name: str = "", code: int = 0, details=None) -> dict:
    error = CreateOrderError(
        name=name,
        message=message,
        code=code,
        details=[ErrorDetail(**d) for d in details or []],
    )
    return {"success": False, "data": error.model_dump()}


def _field_label(field_name: str) -> str:
    return field_name.replace("_", " ").capitalize()


def missing_fields_response(missing: list[str]) -> dict:
    """WooCommerce-style notice list for required checkout fields."""
    items = "".join(
        f"<li>{html.escape(_field_label(name))} is a required field.</li>"
        for name in missing
    )
    return {
        "success": False,
        "messages": f'<ul class="woocommerce-error" role="alert">{items}</ul>',
    }


class CreateOrderHandler:
    def __init__(
        self,
        settings: Settings,
        store: InMemoryStore,
        purchase_unit_factory: PurchaseUnitFactory,
        order_endpoint: OrderEndpoint,
        payer_factory: PayerFactory | None = None,
        payment_token_repository: Optional[PaymentTokenRepository] = None,
        subscription_helper: Optional[SubscriptionHelper] = None,
    ):
        self.settings = settings
        self.store = store
        self.purchase_unit_factory = purchase_unit_factory
        self.order_endpoint = order_endpoint
        self.payer_factory = payer_factory or PayerFactory()
        self.payment_token_repository = payment_token_repository
        self.subscription_helper = subscription_helper

    def handle(self, request: CreateOrderRequest) -> dict[str, Any]:
        if not verify_nonce(request.nonce, self.settings.NONCE_SECRET):
            return error_response("Could not validate nonce.")

        if request.context == CHECKOUT_CONTEXT:
            missing = [
                name
                for name in self.settings.CHECKOUT_REQUIRED_FIELDS
                if not str(request.form.get(name, "")).strip()
            ]
            if missing:
                return missing_fields_response(missing)

        try:
            purchase_unit = self._purchase_unit(request)
            payment_token = self._payment_token(request)
            body_filters = self._body_filters(request, payment_token)
            order = self.order_endpoint.create(
                [purchase_unit],
                payer=self.payer_factory.from_paypal_response(request.payer),
                payment_token=payment_token,
                bn_code=request.bn_code or self.settings.PAYPAL_BN_CODE,
                body_filters=body_filters,
            )
        except PayPalApiError as e:
            log.warning(
                BusinessEvents.ORDER_FAILED,
                context=request.context,
                error=str(e),
                issues=e.issues(),
            )
            return error_response(
                str(e), name=e.name, code=e.status_code or 0, details=e.details
            )
        except PayPalError as e:
            log.warning(BusinessEvents.ORDER_FAILED, context=request.context, error=str(e))
            return error_response(str(e))

        log.info(
            BusinessEvents.ORDER_CREATED,
            paypal_order_id=order.id,
            context=request.context,
            funding_source=request.funding_source,
        )
        return {"success": True, "data": order.to_dict()}

    def _purchase_unit(self, request: CreateOrderRequest):
        if request.context == PAY_NOW_CONTEXT and request.order_id:
            order = self.store.order(request.order_id)
            if order is None:
                raise PayPalError("Order not found.")
            return self.purchase_unit_factory.from_wc_order(order)

        cart = self.store.cart()
        if cart is None:
            raise PayPalError("Your cart is empty.")
        return self.purchase_unit_factory.from_wc_cart(cart, self.store.session())

    def _payment_token(self, request: CreateOrderRequest) -> Optional[PaymentToken]:
        token_id = next(
            (request.form[f] for f in SAVED_TOKEN_FIELDS if request.form.get(f)), None
        )
        if not token_id or self.payment_token_repository is None:
            return None

        customer = self.store.session().customer
        if customer is None:
            return None
        for token in self.payment_token_repository.all_for_user_id(customer.id):
            if token.id == token_id:
                return token
        raise PayPalError("Saved payment method not found.")

    def _body_filters(self, request: CreateOrderRequest, payment_token):
        if self.subscription_helper is None or not request.post_ID:
            return ()
        subscription = self.store.subscription(request.post_ID)
        if subscription is None:
            return ()
        return (
            lambda data: self.subscription_helper.renewal_payment_source(
                data, subscription, request.wc_order_action, payment_token
            ),
        )
