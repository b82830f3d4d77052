"""Test configuration and fixtures."""

import os
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from api_client.factory import (
    AmountFactory,
    ItemFactory,
    OrderFactory,
    PaymentsFactory,
    PurchaseUnitFactory,
    ShippingFactory,
)
from core.settings import Settings
from woocommerce.models import Address, Cart, Customer, Fee, LineItem, Order

TEST_NONCE_SECRET = "test-nonce-secret"


class MockResponse:
    """Custom mock response class to ensure proper status_code handling."""

    def __init__(self, status_code, json_data=None, text="", headers=None, url=""):
        self.status_code = status_code
        self._json_data = json_data
        self.text = text
        self.headers = headers or {"PayPal-Debug-Id": "dbg-123"}
        self.url = url

    def json(self):
        if self._json_data is None:
            raise ValueError("No JSON body")
        return self._json_data


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Setup test environment variables before each test."""
    # Store original env vars
    original_env = dict(os.environ)

    # Set test environment variables
    os.environ.update(
        {
            "PAYPAL_HOST": "https://api.test.paypal.local",
            "PAYPAL_CLIENT_ID": "test_client_id",
            "PAYPAL_SECRET": "test_secret",
            "NONCE_SECRET": TEST_NONCE_SECRET,
            "APP_NAME": "Test Checkout",
            "ENVIRONMENT": "development",
            "DEBUG": "true",
        }
    )

    yield

    # Restore original env vars
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def mock_settings():
    return Settings(
        PAYPAL_HOST="https://api.test.paypal.local",
        PAYPAL_CLIENT_ID="test_client_id",
        PAYPAL_SECRET="test_secret",
        NONCE_SECRET=TEST_NONCE_SECRET,
        VAULT_ENABLED=True,
        VAULT_ENABLED_DCC=True,
        APP_NAME="Test Checkout",
        DEBUG=True,
        ENVIRONMENT="development",
    )


@pytest.fixture
def bearer():
    bearer = MagicMock()
    bearer.bearer.return_value = "test-access-token"
    return bearer


@pytest.fixture
def http_session():
    """Stands in for requests.Session; set .request.return_value per test."""
    return MagicMock()


@pytest.fixture
def purchase_unit_factory():
    return PurchaseUnitFactory(
        AmountFactory(), ItemFactory(), ShippingFactory(), PaymentsFactory()
    )


@pytest.fixture
def order_factory(purchase_unit_factory):
    return OrderFactory(purchase_unit_factory)


@pytest.fixture
def shipping_address():
    return Address(
        first_name="Jane",
        last_name="Doe",
        address_1="1 Main Street",
        city="Berlin",
        state="BE",
        postcode="10115",
        country="DE",
    )


@pytest.fixture
def wc_cart():
    """A cart with a product, a positive fee and a coupon-like negative fee."""
    return Cart(
        currency="EUR",
        line_items=[
            LineItem(
                name="Hoodie",
                quantity=2,
                unit_price=Decimal("25.00"),
                unit_tax=Decimal("4.75"),
                sku="HD-1",
            )
        ],
        fees=[
            Fee(name="Gift wrap", amount=Decimal("3.00"), tax=Decimal("0.57")),
            Fee(name="Loyalty discount", amount=Decimal("-5.00")),
        ],
        shipping_total=Decimal("4.90"),
        shipping_tax=Decimal("0.93"),
        total=Decimal("63.90"),
    )


@pytest.fixture
def wc_order(wc_cart, shipping_address):
    return Order(
        currency=wc_cart.currency,
        line_items=list(wc_cart.line_items),
        fees=list(wc_cart.fees),
        shipping_total=wc_cart.shipping_total,
        shipping_tax=wc_cart.shipping_tax,
        total=wc_cart.total,
        id=42,
        order_number="1042",
        customer_id=7,
        payment_method="ppcp-gateway",
        shipping_address=shipping_address,
        billing_address=shipping_address,
    )


@pytest.fixture
def customer(shipping_address):
    return Customer(
        id=7,
        email="jane@example.com",
        first_name="Jane",
        last_name="Doe",
        shipping_address=shipping_address,
        billing_address=shipping_address,
    )


@pytest.fixture
def paypal_order_response():
    """A PayPal v2 order as returned with Prefer: return=representation."""
    return {
        "id": "5O190127TN364715T",
        "status": "CREATED",
        "intent": "CAPTURE",
        "create_time": "2024-01-15T10:00:00Z",
        "purchase_units": [
            {
                "reference_id": "default",
                "custom_id": "42",
                "invoice_id": "WC-1042",
                "amount": {
                    "currency_code": "EUR",
                    "value": "63.90",
                    "breakdown": {
                        "item_total": {"currency_code": "EUR", "value": "53.00"},
                        "shipping": {"currency_code": "EUR", "value": "4.90"},
                        "tax_total": {"currency_code": "EUR", "value": "11.00"},
                        "discount": {"currency_code": "EUR", "value": "5.00"},
                    },
                },
                "items": [
                    {
                        "name": "Hoodie",
                        "unit_amount": {"currency_code": "EUR", "value": "25.00"},
                        "tax": {"currency_code": "EUR", "value": "4.75"},
                        "quantity": "2",
                        "sku": "HD-1",
                        "category": "PHYSICAL_GOODS",
                    }
                ],
            }
        ],
    }


@pytest.fixture
def client():
    """Test client running the app lifespan against the test environment."""
    from main import app

    with TestClient(app) as test_client:
        yield test_client

    # Clean up
    app.dependency_overrides.clear()
