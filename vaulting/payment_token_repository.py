from typing import Optional, Sequence

from api_client.endpoint.payment_token_endpoint import PaymentTokenEndpoint
from api_client.entity.payment_token import PaymentToken


class PaymentTokenRepository:
    """Read and delete the payment methods a customer has vaulted at PayPal.

    Endpoint errors propagate; callers that can live without tokens decide
    themselves whether to swallow them.
    """

    def __init__(self, endpoint: PaymentTokenEndpoint):
        self.endpoint = endpoint

    def for_user_id(self, user_id: int) -> Optional[PaymentToken]:
        tokens = self.endpoint.for_user(user_id)
        return tokens[0] if tokens else None

    def all_for_user_id(self, user_id: int) -> list[PaymentToken]:
        return self.endpoint.for_user(user_id)

    def delete_token(self, token: PaymentToken) -> bool:
        return self.endpoint.delete_token(token)

    @staticmethod
    def tokens_contains_paypal(tokens: Sequence[PaymentToken]) -> bool:
        return any(token.is_paypal() for token in tokens)

    @staticmethod
    def tokens_contains_card(tokens: Sequence[PaymentToken]) -> bool:
        return any(token.is_card() for token in tokens)
