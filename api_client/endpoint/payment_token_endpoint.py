from api_client.entity.payment_token import PaymentToken
from api_client.endpoint.request import PayPalEndpoint
from api_client.factory.payment_token_factory import PaymentTokenFactory


class PaymentTokenEndpoint(PayPalEndpoint):
    """Vaulted payment methods under ``v2/vault/payment-tokens``.

    PayPal keys the vault by our customer id, which is the store user id
    with a configurable prefix so several shops can share one account.
    """

    def __init__(
        self,
        host,
        bearer,
        payment_token_factory: PaymentTokenFactory,
        error_response_factory=None,
        customer_prefix: str = "WC-",
        session=None,
        timeout: float = 30.0,
    ):
        super().__init__(host, bearer, error_response_factory, session, timeout)
        self.payment_token_factory = payment_token_factory
        self.customer_prefix = customer_prefix

    def for_user(self, user_id: int) -> list[PaymentToken]:
        fail = "Could not fetch payment token."
        response = self.send(
            "GET",
            "vault/payment-tokens",
            fail,
            params={"customer_id": f"{self.customer_prefix}{user_id}"},
        )
        if response.status_code != 200:
            raise self.error_exception(response, fail)

        data = self.decode(response, fail)
        return [
            self.payment_token_factory.from_paypal_response(raw)
            for raw in data.get("payment_tokens") or []
        ]

    def delete_token(self, token: PaymentToken) -> bool:
        fail = "Could not delete payment token."
        response = self.send("DELETE", f"vault/payment-tokens/{token.id}", fail)
        if response.status_code != 204:
            raise self.error_exception(response, fail)
        return True
