"""
Amount factory.

Builds the purchase unit total and its breakdown. PayPal checks that
total = item_total + tax_total + shipping + handling + insurance
        - shipping_discount - discount,
so negative fees move from the items into the discount.
"""

from typing import Any

from api_client.entity.amount import Amount, AmountBreakdown
from api_client.entity.money import Money
from api_client.factory.money_factory import MoneyFactory
from woocommerce.sources import WcCart, WcOrder

BREAKDOWN_KEYS = (
    "item_total",
    "shipping",
    "tax_total",
    "handling",
    "insurance",
    "shipping_discount",
    "discount",
)


class AmountFactory:
    def __init__(self, money_factory: MoneyFactory | None = None):
        self.money_factory = money_factory or MoneyFactory()

    def from_wc_order(self, order: WcOrder) -> Amount:
        return self._from_totals(order)

    def from_wc_cart(self, cart: WcCart) -> Amount:
        return self._from_totals(cart)

    def _from_totals(self, source) -> Amount:
        currency = source.currency
        item_total = Money.zero(currency)
        tax_total = Money(source.shipping_tax, currency)
        discount = Money(source.discount_total, currency)

        for line_item in source.line_items:
            item_total += Money(line_item.unit_price, currency) * int(line_item.quantity)
            tax_total += Money(line_item.unit_tax, currency) * int(line_item.quantity)

        for fee in source.fees:
            amount = Money(fee.amount, currency)
            if amount.is_negative():
                discount -= amount
                continue
            item_total += amount
            tax_total += Money(fee.tax, currency)

        breakdown = AmountBreakdown(
            item_total=item_total,
            shipping=Money(source.shipping_total, currency),
            tax_total=tax_total,
            discount=None if discount.is_zero() else discount,
        )
        return Amount(Money(source.total, currency), breakdown)

    def from_paypal_response(self, data: dict[str, Any]) -> Amount:
        money = self.money_factory.from_paypal_response(data)
        breakdown = None
        raw_breakdown = data.get("breakdown")
        if raw_breakdown:
            breakdown = AmountBreakdown(
                **{
                    key: self.money_factory.from_paypal_response(raw_breakdown[key])
                    for key in BREAKDOWN_KEYS
                    if raw_breakdown.get(key)
                }
            )
        return Amount(money, breakdown)
