from vaulting.payment_token_repository import PaymentTokenRepository

__all__ = ["PaymentTokenRepository"]
