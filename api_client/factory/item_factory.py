from typing import Any

from api_client.entity.item import DIGITAL_GOODS, PHYSICAL_GOODS, Item
from api_client.entity.money import Money
from api_client.exceptions import PayPalError
from api_client.factory.money_factory import MoneyFactory
from api_client.factory.utils import ensure_object, require
from woocommerce.sources import WcCart, WcFee, WcLineItem, WcOrder

# PayPal rejects longer item names, descriptions and SKUs
MAX_TEXT_LENGTH = 127


def _shorten(text: str) -> str:
    return (text or "").strip()[:MAX_TEXT_LENGTH]


class ItemFactory:
    def __init__(self, money_factory: MoneyFactory | None = None):
        self.money_factory = money_factory or MoneyFactory()

    def from_wc_order(self, order: WcOrder) -> list[Item]:
        """Line items followed by fees, discounts (negative fees) included."""
        return self._from_totals(order)

    def from_wc_cart(self, cart: WcCart) -> list[Item]:
        return self._from_totals(cart)

    def _from_totals(self, source) -> list[Item]:
        currency = source.currency
        items = [self._from_line_item(li, currency) for li in source.line_items]
        items.extend(self._from_fee(fee, currency) for fee in source.fees)
        return items

    @staticmethod
    def _from_line_item(line_item: WcLineItem, currency: str) -> Item:
        return Item(
            name=_shorten(line_item.name),
            unit_amount=Money(line_item.unit_price, currency),
            quantity=int(line_item.quantity),
            description=_shorten(line_item.description),
            tax=Money(line_item.unit_tax, currency),
            sku=_shorten(line_item.sku),
            category=DIGITAL_GOODS if line_item.is_virtual else PHYSICAL_GOODS,
        )

    @staticmethod
    def _from_fee(fee: WcFee, currency: str) -> Item:
        return Item(
            name=_shorten(fee.name),
            unit_amount=Money(fee.amount, currency),
            quantity=1,
            tax=Money(fee.tax, currency),
        )

    def from_paypal_response(self, data: dict[str, Any]) -> Item:
        data = ensure_object(data, "Item")
        name = require(data, "name", "Item")
        unit_amount = self.money_factory.from_paypal_response(
            require(data, "unit_amount", "Item")
        )
        try:
            quantity = int(require(data, "quantity", "Item"))
        except (TypeError, ValueError) as exc:
            raise PayPalError("Item response has an invalid quantity.") from exc
        if quantity < 0:
            raise PayPalError("Item response has an invalid quantity.")

        tax = None
        if data.get("tax"):
            tax = self.money_factory.from_paypal_response(data["tax"])

        return Item(
            name=name,
            unit_amount=unit_amount,
            quantity=quantity,
            description=data.get("description", ""),
            tax=tax,
            sku=data.get("sku", ""),
            category=data.get("category", PHYSICAL_GOODS),
        )
