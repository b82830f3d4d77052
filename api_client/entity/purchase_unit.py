"""
Purchase unit entity.

A purchase unit groups the amount, line items and shipping of one logical
sale inside a PayPal order.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from api_client.entity.amount import Amount
from api_client.entity.item import Item
from api_client.entity.money import Money
from api_client.entity.payments import Payments
from api_client.entity.shipping import Shipping
from api_client.exceptions import PayPalError


@dataclass(frozen=True)
class PurchaseUnit:
    reference_id: str
    amount: Amount
    items: tuple[Item, ...] = field(default_factory=tuple)
    shipping: Optional[Shipping] = None
    description: str = ""
    custom_id: str = ""
    invoice_id: str = ""
    soft_descriptor: str = ""
    payments: Optional[Payments] = None

    def __post_init__(self):
        if not self.reference_id:
            raise PayPalError("A purchase unit needs a reference_id.")
        object.__setattr__(self, "items", tuple(self.items))

    def items_match_breakdown(self) -> bool:
        """Whether the items add up to the item and tax totals of the amount.

        PayPal rejects a purchase unit whose items contradict its breakdown,
        which happens with rounding in prices that include tax.
        """
        breakdown = self.amount.breakdown
        if breakdown is None or not self.items:
            return True

        currency = self.amount.currency_code
        item_total = Money.zero(currency)
        tax_total = Money.zero(currency)
        for item in self.items:
            item_total += item.unit_amount * item.quantity
            if item.tax is not None:
                tax_total += item.tax * item.quantity

        if breakdown.item_total is not None and item_total != breakdown.item_total:
            return False
        if breakdown.tax_total is not None and any(i.tax for i in self.items):
            return tax_total == breakdown.tax_total
        return True

    def to_dict(self) -> dict[str, Any]:
        unit: dict[str, Any] = {
            "reference_id": self.reference_id,
            "amount": self.amount.to_dict(),
        }
        if self.items and self.items_match_breakdown():
            unit["items"] = [item.to_dict() for item in self.items]
        for key in ("description", "custom_id", "invoice_id", "soft_descriptor"):
            value = getattr(self, key)
            if value:
                unit[key] = value
        if self.shipping is not None:
            unit["shipping"] = self.shipping.to_dict()
        if self.payments is not None:
            unit["payments"] = self.payments.to_dict()
        return unit
