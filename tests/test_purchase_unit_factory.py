"""
PurchaseUnitFactory tests: mapping store orders and carts to PayPal and back.
"""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from api_client.entity.item import DIGITAL_GOODS, PHYSICAL_GOODS, Item
from api_client.entity.money import Money
from api_client.exceptions import PayPalError
from api_client.factory import ItemFactory
from woocommerce.models import Address, Fee, LineItem, Session


def test_from_wc_order_identifies_the_order(purchase_unit_factory, wc_order):
    unit = purchase_unit_factory.from_wc_order(wc_order)

    assert unit.reference_id == "default"
    assert unit.custom_id == "42"
    assert unit.invoice_id == "WC-1042"


@pytest.mark.parametrize("order_id,number", [(1, "1"), (987654, "2024-0001")])
def test_from_wc_order_ids_for_any_order(purchase_unit_factory, wc_order, order_id, number):
    wc_order.id = order_id
    wc_order.order_number = number

    unit = purchase_unit_factory.from_wc_order(wc_order)

    assert unit.custom_id == str(order_id)
    assert unit.invoice_id == f"WC-{number}"


def test_from_wc_cart_has_no_order_ids(purchase_unit_factory, wc_cart, customer):
    unit = purchase_unit_factory.from_wc_cart(wc_cart, Session(customer=customer))

    assert unit.reference_id == "default"
    assert unit.custom_id == ""
    assert unit.invoice_id == ""
    assert "custom_id" not in unit.to_dict()


def test_negative_fees_are_not_items(purchase_unit_factory, wc_order):
    unit = purchase_unit_factory.from_wc_order(wc_order)

    assert [item.name for item in unit.items] == ["Hoodie", "Gift wrap"]
    assert all(not item.unit_amount.is_negative() for item in unit.items)


def test_amount_breakdown_moves_negative_fees_to_discount(purchase_unit_factory, wc_order):
    amount = purchase_unit_factory.from_wc_order(wc_order).amount

    assert amount.money == Money("63.90", "EUR")
    assert amount.breakdown.item_total == Money("53.00", "EUR")
    assert amount.breakdown.tax_total == Money("11.00", "EUR")
    assert amount.breakdown.shipping == Money("4.90", "EUR")
    assert amount.breakdown.discount == Money("5.00", "EUR")


def test_items_are_sent_when_they_match_the_breakdown(purchase_unit_factory, wc_order):
    wc_order.shipping_tax = Decimal("0")
    wc_order.total = Decimal("62.97")

    data = purchase_unit_factory.from_wc_order(wc_order).to_dict()

    assert [item["name"] for item in data["items"]] == ["Hoodie", "Gift wrap"]
    assert data["amount"]["breakdown"]["tax_total"] == {"currency_code": "EUR", "value": "10.07"}
    assert data["amount"]["breakdown"]["discount"] == {"currency_code": "EUR", "value": "5.00"}


def test_items_are_left_out_when_shipping_tax_breaks_the_sum(purchase_unit_factory, wc_order):
    """Shipping tax is part of tax_total but of no item, PayPal would reject the items."""
    data = purchase_unit_factory.from_wc_order(wc_order).to_dict()

    assert "items" not in data
    assert data["amount"]["value"] == "63.90"


def test_order_shipping_is_mapped(purchase_unit_factory, wc_order):
    unit = purchase_unit_factory.from_wc_order(wc_order)

    assert unit.shipping.name == "Jane Doe"
    assert unit.shipping.address.country_code == "DE"
    assert unit.shipping.address.postal_code == "10115"
    assert unit.shipping.address.admin_area_2 == "Berlin"


@pytest.mark.parametrize(
    "address",
    [
        Address(country="DE", postcode=""),
        Address(country="", postcode="10115"),
        None,
    ],
)
def test_order_without_usable_address_has_no_shipping(purchase_unit_factory, wc_order, address):
    wc_order.shipping_address = address

    unit = purchase_unit_factory.from_wc_order(wc_order)

    assert unit.shipping is None
    assert "shipping" not in unit.to_dict()


def test_cart_shipping_needs_a_customer(purchase_unit_factory, wc_cart, customer):
    assert purchase_unit_factory.from_wc_cart(wc_cart, Session()).shipping is None

    unit = purchase_unit_factory.from_wc_cart(wc_cart, Session(customer=customer))
    assert unit.shipping is not None
    assert unit.shipping.address.country_code == "DE"


def test_cart_shipping_with_incomplete_customer_address(purchase_unit_factory, wc_cart, customer):
    customer.shipping_address = Address(country="DE")

    unit = purchase_unit_factory.from_wc_cart(wc_cart, Session(customer=customer))

    assert unit.shipping is None


def test_virtual_line_items_are_digital_goods(purchase_unit_factory, wc_order):
    wc_order.line_items = [
        LineItem(name="E-book", quantity=1, unit_price=Decimal("9.99"), is_virtual=True)
    ]
    wc_order.fees = []

    unit = purchase_unit_factory.from_wc_order(wc_order)

    assert unit.items[0].category == DIGITAL_GOODS


def test_long_item_names_are_truncated():
    items = ItemFactory()._from_totals(
        MagicMock(
            currency="EUR",
            line_items=[LineItem(name="x" * 300, quantity=1, unit_price=Decimal("1"))],
            fees=[Fee(name="Fee", amount=Decimal("1"))],
        )
    )
    assert len(items[0].name) == 127
    assert items[1].quantity == 1


def test_from_paypal_response(purchase_unit_factory, paypal_order_response):
    unit = purchase_unit_factory.from_paypal_response(
        paypal_order_response["purchase_units"][0]
    )

    assert unit.reference_id == "default"
    assert unit.custom_id == "42"
    assert unit.invoice_id == "WC-1042"
    assert unit.amount.money == Money("63.90", "EUR")
    assert unit.amount.breakdown.discount == Money("5.00", "EUR")
    assert unit.items[0].quantity == 2
    assert unit.payments is None
    assert unit.shipping is None


@pytest.mark.parametrize("data", [{}, {"reference_id": ""}, {"reference_id": None}, None])
def test_from_paypal_response_requires_reference_id(purchase_unit_factory, data):
    with pytest.raises(PayPalError):
        purchase_unit_factory.from_paypal_response(data)


def test_missing_reference_id_aborts_the_whole_mapping():
    """The payments factory is never consulted for a unit without a reference id."""
    from api_client.factory import (
        AmountFactory,
        PurchaseUnitFactory,
        ShippingFactory,
    )

    payments_factory = MagicMock()
    factory = PurchaseUnitFactory(
        AmountFactory(), ItemFactory(), ShippingFactory(), payments_factory
    )

    with pytest.raises(PayPalError):
        factory.from_paypal_response({"payments": {"captures": []}})
    payments_factory.from_paypal_response.assert_not_called()


def test_payments_are_passed_to_payments_factory_unmodified(paypal_order_response):
    from api_client.factory import AmountFactory, PurchaseUnitFactory, ShippingFactory

    payments_factory = MagicMock()
    factory = PurchaseUnitFactory(
        AmountFactory(), ItemFactory(), ShippingFactory(), payments_factory
    )
    raw = dict(paypal_order_response["purchase_units"][0])
    raw["payments"] = {
        "captures": [
            {
                "id": "3C679366HH908993F",
                "status": "COMPLETED",
                "amount": {"currency_code": "EUR", "value": "63.90"},
            }
        ]
    }

    unit = factory.from_paypal_response(raw)

    payments_factory.from_paypal_response.assert_called_once_with(raw["payments"])
    assert unit.payments is payments_factory.from_paypal_response.return_value


def test_payments_are_mapped(purchase_unit_factory, paypal_order_response):
    raw = dict(paypal_order_response["purchase_units"][0])
    raw["payments"] = {
        "authorizations": [
            {
                "id": "0VF52814937998046",
                "status": "CREATED",
                "amount": {"currency_code": "EUR", "value": "63.90"},
            }
        ]
    }

    unit = purchase_unit_factory.from_paypal_response(raw)

    assert unit.payments.authorizations[0].id == "0VF52814937998046"
    assert unit.payments.authorizations[0].is_capturable()
    assert unit.payments.captures == ()


@pytest.mark.parametrize(
    "category,expected",
    [
        (PHYSICAL_GOODS, PHYSICAL_GOODS),
        (DIGITAL_GOODS, DIGITAL_GOODS),
        ("DONATION", PHYSICAL_GOODS),
    ],
)
def test_item_wire_form_round_trip(category, expected):
    item = Item("Mug", Money("5.50", "USD"), 3, tax=Money("1", "USD"), category=category)

    parsed = ItemFactory().from_paypal_response(item.to_dict())

    assert parsed.name == item.name
    assert parsed.unit_amount == item.unit_amount
    assert parsed.quantity == item.quantity
    assert parsed.category == expected


def test_item_from_paypal_response_requires_fields():
    with pytest.raises(PayPalError):
        ItemFactory().from_paypal_response({"name": "Mug", "quantity": "1"})
    with pytest.raises(PayPalError):
        ItemFactory().from_paypal_response(
            {
                "name": "Mug",
                "unit_amount": {"currency_code": "EUR", "value": "1"},
                "quantity": "many",
            }
        )


def test_item_from_paypal_response_rejects_negative_quantity():
    with pytest.raises(PayPalError, match="invalid quantity"):
        ItemFactory().from_paypal_response(
            {
                "name": "Mug",
                "unit_amount": {"currency_code": "EUR", "value": "1"},
                "quantity": "-1",
            }
        )


def test_null_items_and_payment_lists(purchase_unit_factory, paypal_order_response):
    data = dict(paypal_order_response["purchase_units"][0])
    data["items"] = None
    data["payments"] = {"authorizations": None, "captures": None, "refunds": None}

    unit = purchase_unit_factory.from_paypal_response(data)

    assert unit.items == ()
    assert unit.payments.captures == ()
    assert unit.payments.refunds == ()


@pytest.mark.parametrize("data", [["x"], "x", 3])
def test_non_object_payments_block(purchase_unit_factory, paypal_order_response, data):
    unit = dict(paypal_order_response["purchase_units"][0])
    unit["payments"] = data

    with pytest.raises(PayPalError, match="not an object"):
        purchase_unit_factory.from_paypal_response(unit)
