"""
Simple smoke tests to verify basic functionality.
"""

from unittest.mock import MagicMock, patch

import pytest

from core.settings import Settings


def test_app_startup(client):
    """Test that the application starts up properly."""
    response = client.get("/healthz")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["app_name"] == "Test Checkout"
    assert data["paypal_host"] == "https://api.test.paypal.local"
    assert "environment" in data


def test_health_alias(client):
    assert client.get("/health").json()["status"] == "ok"


def test_openapi_available(client):
    """Test that OpenAPI documentation is available."""
    response = client.get("/docs")
    assert response.status_code == 200


def test_settings_require_client_id(monkeypatch):
    monkeypatch.delenv("PAYPAL_CLIENT_ID", raising=False)
    with pytest.raises(RuntimeError, match="PAYPAL_CLIENT_ID"):
        Settings()


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("PAYPAL_INTENT", "AUTHORIZE")
    monkeypatch.setenv("VAULT_ENABLED", "true")

    settings = Settings()

    assert settings.PAYPAL_INTENT == "AUTHORIZE"
    assert settings.VAULT_ENABLED is True
    assert settings.CHECKOUT_REQUIRED_FIELDS[0] == "billing_first_name"


@patch("core.dependencies.PayPalBearer")
def test_dependency_graph(mock_bearer, mock_settings):
    """The endpoint graph builds from settings without touching the network."""
    from core import dependencies

    dependencies.clear_settings()
    bearer = dependencies.get_bearer(mock_settings)
    endpoint = dependencies.get_order_endpoint(
        mock_settings, bearer, dependencies.get_purchase_unit_factory()
    )
    repository = dependencies.get_payment_token_repository(mock_settings, bearer)
    helper = dependencies.get_subscription_helper(mock_settings, repository, endpoint)
    handler = dependencies.get_create_order_handler(
        mock_settings,
        MagicMock(),
        dependencies.get_purchase_unit_factory(),
        endpoint,
        repository,
        helper,
    )

    mock_bearer.assert_called_once_with(
        "https://api.test.paypal.local",
        "test_client_id",
        "test_secret",
        timeout=30.0,
    )
    assert endpoint.host == "https://api.test.paypal.local"
    assert repository.endpoint.customer_prefix == "WC-"
    assert handler.subscription_helper is helper

    dependencies.clear_settings()
