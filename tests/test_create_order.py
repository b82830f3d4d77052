"""
Create-order backend tests: the handler and the AJAX route.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from api.schemas import CreateOrderRequest
from api_client.entity import CardSource, Order, PaymentToken
from api_client.exceptions import PayPalApiError, PayPalError
from checkout.create_order import CreateOrderHandler
from checkout.nonce import create_nonce
from core.dependencies import (
    get_order_endpoint,
    get_payment_token_repository,
    get_store,
)
from subscriptions.helper import CREDIT_CARD_GATEWAY_ID, SubscriptionHelper
from tests.conftest import TEST_NONCE_SECRET
from woocommerce.models import InMemoryStore, Session, Subscription

CHECKOUT_FORM = {
    "billing_first_name": "Jane",
    "billing_last_name": "Doe",
    "billing_email": "jane@example.com",
}


@pytest.fixture
def store(wc_cart, wc_order, customer):
    return InMemoryStore(
        current_cart=wc_cart,
        current_session=Session(customer=customer),
        orders={wc_order.id: wc_order},
    )


@pytest.fixture
def order_endpoint(order_factory, paypal_order_response):
    endpoint = MagicMock()
    endpoint.create.return_value = order_factory.from_paypal_response(paypal_order_response)
    return endpoint


@pytest.fixture
def handler(mock_settings, store, purchase_unit_factory, order_endpoint):
    return CreateOrderHandler(mock_settings, store, purchase_unit_factory, order_endpoint)


def make_request(**overrides):
    data = {
        "nonce": create_nonce(TEST_NONCE_SECRET),
        "context": "checkout",
        "payment_method": "ppcp-gateway",
        "form": dict(CHECKOUT_FORM),
    }
    data.update(overrides)
    return CreateOrderRequest(**data)


def test_checkout_creates_order_from_cart(handler, order_endpoint):
    result = handler.handle(make_request(payer={"email_address": "jane@example.com"}))

    assert result["success"] is True
    assert result["data"]["id"] == "5O190127TN364715T"
    assert result["data"]["purchase_units"][0]["custom_id"] == "42"

    args, kwargs = order_endpoint.create.call_args
    unit = args[0][0]
    assert unit.custom_id == ""
    assert unit.shipping is not None
    assert kwargs["payer"].email_address == "jane@example.com"
    assert kwargs["payment_token"] is None


def test_pay_now_uses_stored_order(handler, order_endpoint):
    result = handler.handle(make_request(context="pay-now", order_id=42, form={}))

    assert result["success"] is True
    unit = order_endpoint.create.call_args.args[0][0]
    assert unit.custom_id == "42"
    assert unit.invoice_id == "WC-1042"


def test_pay_now_unknown_order(handler, order_endpoint):
    result = handler.handle(make_request(context="pay-now", order_id=404, form={}))

    assert result == {
        "success": False,
        "data": {"name": "", "message": "Order not found.", "code": 0, "details": []},
    }
    order_endpoint.create.assert_not_called()


def test_bn_code_falls_back_to_settings(handler, order_endpoint, mock_settings):
    mock_settings.PAYPAL_BN_CODE = "Woo_PPCP"

    handler.handle(make_request())
    assert order_endpoint.create.call_args.kwargs["bn_code"] == "Woo_PPCP"

    handler.handle(make_request(bn_code="Woo_PPCP_Cart"))
    assert order_endpoint.create.call_args.kwargs["bn_code"] == "Woo_PPCP_Cart"


def test_invalid_nonce(handler, order_endpoint):
    result = handler.handle(make_request(nonce="0000000000"))

    assert result["success"] is False
    assert result["data"]["message"] == "Could not validate nonce."
    order_endpoint.create.assert_not_called()


def test_missing_checkout_fields_return_store_notices(handler, order_endpoint):
    result = handler.handle(make_request(form={"billing_first_name": "Jane", "billing_email": " "}))

    assert result["success"] is False
    assert result["messages"] == (
        '<ul class="woocommerce-error" role="alert">'
        "<li>Billing last name is a required field.</li>"
        "<li>Billing email is a required field.</li>"
        "</ul>"
    )
    order_endpoint.create.assert_not_called()


def test_paypal_api_error_is_reported_with_details(handler, order_endpoint):
    order_endpoint.create.side_effect = PayPalApiError(
        "The requested action could not be performed.",
        status_code=422,
        name="UNPROCESSABLE_ENTITY",
        details=[{"issue": "CITY_REQUIRED", "description": "City is required."}],
    )

    result = handler.handle(make_request())

    assert result == {
        "success": False,
        "data": {
            "name": "UNPROCESSABLE_ENTITY",
            "message": "The requested action could not be performed.",
            "code": 422,
            "details": [{"issue": "CITY_REQUIRED", "description": "City is required."}],
        },
    }


def test_paypal_error_is_reported_without_details(handler, order_endpoint):
    order_endpoint.create.side_effect = PayPalError("Could not create token.")

    result = handler.handle(make_request())

    assert result["data"] == {
        "name": "",
        "message": "Could not create token.",
        "code": 0,
        "details": [],
    }


def test_empty_cart(handler, store, order_endpoint):
    store.current_cart = None

    result = handler.handle(make_request())

    assert result["success"] is False
    assert result["data"]["message"] == "Your cart is empty."


def test_saved_card_renewal(mock_settings, store, purchase_unit_factory, order_endpoint):
    card = PaymentToken("9bb2", source=CardSource(brand="VISA", last_digits="4242"))
    repository = MagicMock()
    repository.all_for_user_id.return_value = [card]
    store.subscriptions[11] = Subscription(
        id=11, customer_id=7, payment_method=CREDIT_CARD_GATEWAY_ID
    )
    handler = CreateOrderHandler(
        mock_settings,
        store,
        purchase_unit_factory,
        order_endpoint,
        payment_token_repository=repository,
        subscription_helper=SubscriptionHelper(repository, mock_settings),
    )

    handler.handle(
        make_request(
            form={**CHECKOUT_FORM, "saved_credit_card": "9bb2"},
            post_ID="11",
            wc_order_action="wcs_process_renewal",
        )
    )

    kwargs = order_endpoint.create.call_args.kwargs
    assert kwargs["payment_token"] is card
    body = {"payment_source": {"token": {"id": "9bb2", "type": "PAYMENT_METHOD_TOKEN"}}}
    (body_filter,) = kwargs["body_filters"]
    assert body_filter(body)["payment_source"]["card"]["vault_id"] == "9bb2"


def test_unknown_saved_token(mock_settings, store, purchase_unit_factory, order_endpoint):
    repository = MagicMock()
    repository.all_for_user_id.return_value = []
    handler = CreateOrderHandler(
        mock_settings,
        store,
        purchase_unit_factory,
        order_endpoint,
        payment_token_repository=repository,
    )

    result = handler.handle(make_request(form={**CHECKOUT_FORM, "saved_paypal_payment": "nope"}))

    assert result["data"]["message"] == "Saved payment method not found."


def test_request_ignores_unknown_fields_and_empty_ids():
    request = CreateOrderRequest.model_validate_json(
        '{"nonce": "n", "order_id": "", "post_ID": 0, "unexpected": true}'
    )

    assert request.order_id is None
    assert request.post_ID is None
    assert request.context == "checkout"


@pytest.fixture
def api_client(client, store, order_endpoint):
    from main import app

    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_order_endpoint] = lambda: order_endpoint
    app.dependency_overrides[get_payment_token_repository] = lambda: MagicMock()
    return client


def test_create_order_route(api_client):
    response = api_client.post(
        "/ajax/create-order",
        json={"nonce": create_nonce(TEST_NONCE_SECRET), "context": "checkout", "form": CHECKOUT_FORM},
    )

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert response.json()["data"]["id"] == "5O190127TN364715T"


def test_create_order_route_accepts_text_plain(api_client):
    """The checkout script posts a JSON string without a JSON content type."""
    body = '{"nonce": "%s", "context": "cart"}' % create_nonce(TEST_NONCE_SECRET)

    response = api_client.post(
        "/ajax/create-order", content=body, headers={"Content-Type": "text/plain"}
    )

    assert response.json()["success"] is True


def test_create_order_route_bad_body(api_client):
    response = api_client.post("/ajax/create-order", content="not json")

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_create_order_route_rejects_non_ascii_nonce(api_client, order_endpoint):
    response = api_client.post("/ajax/create-order", json={"nonce": "é"})

    assert response.status_code == 200
    assert response.json()["success"] is False
    assert response.json()["data"]["message"] == "Could not validate nonce."
    order_endpoint.create.assert_not_called()


def test_create_order_route_runs_handler_in_threadpool(api_client):
    with patch("api.routes.run_in_threadpool", new_callable=AsyncMock) as pool:
        pool.return_value = {"success": True, "data": {"id": "ORDER-1"}}
        response = api_client.post("/ajax/create-order", json={"nonce": "n", "context": "cart"})

    assert response.json() == {"success": True, "data": {"id": "ORDER-1"}}
    handle, payload = pool.await_args.args
    assert isinstance(handle.__self__, CreateOrderHandler)
    assert payload.context == "cart"


def test_script_data_route(api_client):
    data = api_client.get("/ajax/script-data").json()

    assert data["ajax"]["create_order"]["endpoint"].endswith("/ajax/create-order")
    assert len(data["ajax"]["create_order"]["nonce"]) == 10


def test_order_to_dict_shape(order_factory, paypal_order_response):
    order = order_factory.from_paypal_response(paypal_order_response)
    assert isinstance(order, Order)
    assert order.to_dict()["status"] == "CREATED"
