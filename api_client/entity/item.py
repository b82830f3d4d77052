from dataclasses import dataclass, field
from typing import Any, Optional

from api_client.entity.money import Money

PHYSICAL_GOODS = "PHYSICAL_GOODS"
DIGITAL_GOODS = "DIGITAL_GOODS"


def normalize_category(category: str | None) -> str:
    """Anything that is not DIGITAL_GOODS is shipped as PHYSICAL_GOODS."""
    return DIGITAL_GOODS if category == DIGITAL_GOODS else PHYSICAL_GOODS


@dataclass(frozen=True)
class Item:
    """A purchase unit line item."""

    name: str
    unit_amount: Money
    quantity: int
    description: str = ""
    tax: Optional[Money] = None
    sku: str = ""
    category: str = field(default=PHYSICAL_GOODS)

    def __post_init__(self):
        if self.quantity < 0:
            raise ValueError(f"Item quantity must be >= 0, got {self.quantity}")
        object.__setattr__(self, "category", normalize_category(self.category))

    def to_dict(self) -> dict[str, Any]:
        item = {
            "name": self.name,
            "unit_amount": self.unit_amount.to_dict(),
            "quantity": self.quantity,
            "description": self.description,
            "sku": self.sku,
            "category": self.category,
        }
        if self.tax is not None:
            item["tax"] = self.tax.to_dict()
        return item
