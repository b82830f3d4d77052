from dataclasses import dataclass, fields
from typing import Any, Optional

from api_client.entity.money import Money


@dataclass(frozen=True)
class AmountBreakdown:
    """Parts that must add up to the purchase unit total."""

    item_total: Optional[Money] = None
    shipping: Optional[Money] = None
    tax_total: Optional[Money] = None
    handling: Optional[Money] = None
    insurance: Optional[Money] = None
    shipping_discount: Optional[Money] = None
    discount: Optional[Money] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name).to_dict()
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(frozen=True)
class Amount:
    money: Money
    breakdown: Optional[AmountBreakdown] = None

    @property
    def currency_code(self) -> str:
        return self.money.currency_code

    @property
    def value(self):
        return self.money.value

    def to_dict(self) -> dict[str, Any]:
        amount = self.money.to_dict()
        if self.breakdown is not None:
            breakdown = self.breakdown.to_dict()
            if breakdown:
                amount["breakdown"] = breakdown
        return amount
