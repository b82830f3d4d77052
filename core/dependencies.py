from fastapi import Depends

from api_client.authentication import PayPalBearer
from api_client.endpoint import OrderEndpoint, PaymentTokenEndpoint, PaymentsEndpoint
from api_client.factory import (
    AmountFactory,
    AuthorizationsFactory,
    ErrorResponseCollectionFactory,
    ItemFactory,
    OrderFactory,
    PatchCollectionFactory,
    PayerFactory,
    PaymentTokenFactory,
    PaymentsFactory,
    PurchaseUnitFactory,
    ShippingFactory,
)
from checkout.create_order import CreateOrderHandler
from core.settings import Settings
from subscriptions.helper import SubscriptionHelper
from vaulting.payment_token_repository import PaymentTokenRepository
from woocommerce.models import InMemoryStore

# Settings singleton
_settings = None

# Shared between requests so the bearer token cache survives
_bearer = None
_store = None


def get_settings() -> Settings:
    """Dependency that provides application settings."""
    assert (
        _settings is not None
    ), "Settings not initialized. Make sure startup() was called."
    return _settings


def init_settings():
    """Initialize settings singleton."""
    global _settings
    _settings = Settings()


def clear_settings():
    """Clear settings singleton and everything built from it."""
    global _settings, _bearer, _store
    _settings = None
    _bearer = None
    _store = None


def get_bearer(settings: Settings = Depends(get_settings)) -> PayPalBearer:
    global _bearer
    if _bearer is None:
        _bearer = PayPalBearer(
            settings.PAYPAL_HOST,
            settings.PAYPAL_CLIENT_ID,
            settings.PAYPAL_SECRET,
            timeout=settings.PAYPAL_REQUEST_TIMEOUT,
        )
    return _bearer


def get_store() -> InMemoryStore:
    """The commerce store the checkout reads carts and orders from."""
    global _store
    if _store is None:
        _store = InMemoryStore()
    return _store


def get_purchase_unit_factory() -> PurchaseUnitFactory:
    return PurchaseUnitFactory(
        AmountFactory(),
        ItemFactory(),
        ShippingFactory(),
        PaymentsFactory(),
    )


def get_order_endpoint(
    settings: Settings = Depends(get_settings),
    bearer: PayPalBearer = Depends(get_bearer),
    purchase_unit_factory: PurchaseUnitFactory = Depends(get_purchase_unit_factory),
) -> OrderEndpoint:
    return OrderEndpoint(
        settings.PAYPAL_HOST,
        bearer,
        OrderFactory(purchase_unit_factory, PayerFactory()),
        PatchCollectionFactory(),
        ErrorResponseCollectionFactory(),
        intent=settings.PAYPAL_INTENT,
        timeout=settings.PAYPAL_REQUEST_TIMEOUT,
    )


def get_payments_endpoint(
    settings: Settings = Depends(get_settings),
    bearer: PayPalBearer = Depends(get_bearer),
) -> PaymentsEndpoint:
    return PaymentsEndpoint(
        settings.PAYPAL_HOST,
        bearer,
        AuthorizationsFactory(),
        ErrorResponseCollectionFactory(),
        timeout=settings.PAYPAL_REQUEST_TIMEOUT,
    )


def get_payment_token_repository(
    settings: Settings = Depends(get_settings),
    bearer: PayPalBearer = Depends(get_bearer),
) -> PaymentTokenRepository:
    endpoint = PaymentTokenEndpoint(
        settings.PAYPAL_HOST,
        bearer,
        PaymentTokenFactory(),
        ErrorResponseCollectionFactory(),
        customer_prefix=settings.VAULT_CUSTOMER_PREFIX,
        timeout=settings.PAYPAL_REQUEST_TIMEOUT,
    )
    return PaymentTokenRepository(endpoint)


def get_subscription_helper(
    settings: Settings = Depends(get_settings),
    repository: PaymentTokenRepository = Depends(get_payment_token_repository),
    order_endpoint: OrderEndpoint = Depends(get_order_endpoint),
) -> SubscriptionHelper:
    return SubscriptionHelper(repository, settings, order_endpoint)


def get_create_order_handler(
    settings: Settings = Depends(get_settings),
    store: InMemoryStore = Depends(get_store),
    purchase_unit_factory: PurchaseUnitFactory = Depends(get_purchase_unit_factory),
    order_endpoint: OrderEndpoint = Depends(get_order_endpoint),
    repository: PaymentTokenRepository = Depends(get_payment_token_repository),
    subscription_helper: SubscriptionHelper = Depends(get_subscription_helper),
) -> CreateOrderHandler:
    return CreateOrderHandler(
        settings,
        store,
        purchase_unit_factory,
        order_endpoint,
        PayerFactory(),
        payment_token_repository=repository,
        subscription_helper=subscription_helper,
    )
