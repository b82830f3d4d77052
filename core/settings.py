import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import ConfigDict
from pydantic_settings import BaseSettings

# Load .env file automatically
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # PayPal REST API
    PAYPAL_HOST: str = "https://api-m.sandbox.paypal.com"
    PAYPAL_CLIENT_ID: str
    PAYPAL_SECRET: str = ""
    PAYPAL_REQUEST_TIMEOUT: float = 30.0
    PAYPAL_INTENT: Literal["CAPTURE", "AUTHORIZE"] = "CAPTURE"
    PAYPAL_BN_CODE: str = ""

    # Vaulting
    VAULT_ENABLED: bool = False
    VAULT_ENABLED_DCC: bool = False
    VAULT_CUSTOMER_PREFIX: str = "WC-"

    # Checkout backend
    NONCE_SECRET: str = "change-me"
    CHECKOUT_REQUIRED_FIELDS: list[str] = [
        "billing_first_name",
        "billing_last_name",
        "billing_email",
    ]

    # App settings
    APP_NAME: str = "PayPal Commerce Checkout"
    DEBUG: bool = False
    ENVIRONMENT: Literal["development", "test", "production"] = "development"

    model_config = ConfigDict(env_file=".env", case_sensitive=True)

    def __init__(self, **kwargs):
        # Fail early with a readable message instead of a validation dump
        if not kwargs.get("PAYPAL_CLIENT_ID") and not os.getenv("PAYPAL_CLIENT_ID"):
            raise RuntimeError(
                "PAYPAL_CLIENT_ID not set; create .env or export the variable"
            )
        super().__init__(**kwargs)
