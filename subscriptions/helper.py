"""
Subscription support

Links vaulted PayPal payment tokens to store subscriptions so renewals can be
charged without the customer, and rewrites the create-order request for
merchant-initiated card renewals.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

import structlog

from api_client.endpoint.order_endpoint import OrderEndpoint
from api_client.entity.order import Order
from api_client.entity.payment_token import PAYMENT_METHOD_TOKEN, PaymentToken
from api_client.exceptions import PayPalError
from core.logging import BusinessEvents
from core.settings import Settings
from vaulting.payment_token_repository import PaymentTokenRepository
from woocommerce.sources import WcSubscription

log = structlog.get_logger(__name__)

PAYPAL_GATEWAY_ID = "ppcp-gateway"
CREDIT_CARD_GATEWAY_ID = "ppcp-credit-card-gateway"

# Subscription and order meta keys
PAYPAL_SUBSCRIPTION_META = "ppcp_subscription"
PAYMENT_TOKEN_ID_META = "payment_token_id"
PREVIOUS_TRANSACTION_META = "ppcp_previous_transaction_reference"
PAYPAL_ORDER_ID_META = "_ppcp_paypal_order_id"

RENEWAL_ACTION = "wcs_process_renewal"


@dataclass(frozen=True)
class SavedPaymentOptions:
    """Choices for paying a subscription with a vaulted method.

    message is set instead of options when the customer has nothing vaulted.
    """

    options: list[tuple[str, str]] = field(default_factory=list)
    message: str = ""


def get_paypal_order_transaction_id(order: Order) -> Optional[str]:
    """Id of the first capture of the order, if PayPal captured anything."""
    if not order.purchase_units:
        return None
    payments = order.purchase_units[0].payments
    if payments is None or not payments.captures:
        return None
    return payments.captures[0].id


class SubscriptionHelper:
    def __init__(
        self,
        payment_token_repository: PaymentTokenRepository,
        settings: Settings,
        order_endpoint: Optional[OrderEndpoint] = None,
        logger=None,
    ):
        self.payment_token_repository = payment_token_repository
        self.settings = settings
        self.order_endpoint = order_endpoint
        self.logger = logger or log

    def add_payment_token_id(self, subscription: WcSubscription) -> None:
        """Remember the customer's latest vaulted token on the subscription.

        A PayPal failure must not break the surrounding payment-complete
        flow, so it is logged as a warning.
        """
        try:
            tokens = self.payment_token_repository.all_for_user_id(
                subscription.customer_id
            )
        except PayPalError as error:
            self.logger.warning(
                BusinessEvents.SUBSCRIPTION_TOKEN_FAILED,
                message=(
                    f"Could not add token Id to subscription "
                    f"{subscription.id}: {error}"
                ),
                subscription_id=subscription.id,
            )
            return

        if tokens:
            subscription.update_meta_data(PAYMENT_TOKEN_ID_META, tokens[-1].id or "")
            subscription.save()
            self.logger.info(
                BusinessEvents.SUBSCRIPTION_TOKEN_LINKED,
                subscription_id=subscription.id,
            )

    def on_payment_complete(self, subscription: WcSubscription) -> None:
        if subscription.get_meta(PAYPAL_SUBSCRIPTION_META, ""):
            # Billed by a PayPal subscription plan, nothing is vaulted here
            return

        self.add_payment_token_id(subscription)

        if subscription.related_order_count != 1 or subscription.parent is None:
            return
        if self.order_endpoint is None:
            return

        paypal_order_id = subscription.parent.get_meta(PAYPAL_ORDER_ID_META)
        if not paypal_order_id:
            return

        order = self.order_endpoint.order(paypal_order_id)
        transaction_id = get_paypal_order_transaction_id(order)
        if transaction_id:
            subscription.update_meta_data(PREVIOUS_TRANSACTION_META, transaction_id)
            subscription.save()

    def renewal_payment_source(
        self,
        data: dict[str, Any],
        subscription: Optional[WcSubscription],
        wc_order_action: str,
        payment_token: Optional[PaymentToken],
    ) -> dict[str, Any]:
        """Charge a manually processed card renewal as a stored credential."""
        if subscription is None or wc_order_action != RENEWAL_ACTION:
            return data
        if subscription.payment_method != CREDIT_CARD_GATEWAY_ID:
            return data

        token = (data.get("payment_source") or {}).get("token") or {}
        if token.get("type") != PAYMENT_METHOD_TOKEN:
            return data
        if payment_token is None or payment_token.id != token.get("id"):
            return data
        if not payment_token.is_card():
            return data

        stored_credential = {
            "payment_initiator": "MERCHANT",
            "payment_type": "RECURRING",
            "usage": "SUBSEQUENT",
        }
        previous_reference = subscription.get_meta(PREVIOUS_TRANSACTION_META)
        if previous_reference:
            stored_credential["previous_transaction_reference"] = previous_reference

        data = dict(data)
        data["payment_source"] = {
            "card": {
                "vault_id": token["id"],
                "stored_credential": stored_credential,
            }
        }
        return data

    def saved_paypal_payments(
        self, gateway_id: str, user_id: int, is_change_payment: bool
    ) -> Optional[SavedPaymentOptions]:
        if not (
            self.settings.VAULT_ENABLED
            and gateway_id == PAYPAL_GATEWAY_ID
            and is_change_payment
        ):
            return None

        tokens = self.payment_token_repository.all_for_user_id(user_id)
        if not tokens or not self.payment_token_repository.tokens_contains_paypal(
            tokens
        ):
            return SavedPaymentOptions(
                message=(
                    "No PayPal payments saved, in order to use a saved payment "
                    "you first need to create it through a purchase."
                )
            )
        return SavedPaymentOptions(
            options=[
                (token.id, token.source.email_address)
                for token in tokens
                if token.is_paypal()
            ]
        )

    def saved_credit_cards(
        self, gateway_id: str, user_id: int, is_change_payment: bool
    ) -> Optional[SavedPaymentOptions]:
        if not (
            self.settings.VAULT_ENABLED_DCC
            and is_change_payment
            and gateway_id == CREDIT_CARD_GATEWAY_ID
        ):
            return None

        tokens = self.payment_token_repository.all_for_user_id(user_id)
        if not tokens or not self.payment_token_repository.tokens_contains_card(tokens):
            return SavedPaymentOptions(
                message=(
                    "No Credit Card saved, in order to use a saved Credit Card "
                    "you first need to create it through a purchase."
                )
            )
        return SavedPaymentOptions(
            options=[
                (token.id, f"{token.source.brand} ...{token.source.last_digits}")
                for token in tokens
                if token.is_card()
            ]
        )
