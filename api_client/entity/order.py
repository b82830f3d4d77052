from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from api_client.entity.purchase_unit import PurchaseUnit


class OrderStatus(str, Enum):
    CREATED = "CREATED"
    SAVED = "SAVED"
    APPROVED = "APPROVED"
    VOIDED = "VOIDED"
    COMPLETED = "COMPLETED"
    PAYER_ACTION_REQUIRED = "PAYER_ACTION_REQUIRED"


class OrderIntent(str, Enum):
    CAPTURE = "CAPTURE"
    AUTHORIZE = "AUTHORIZE"


@dataclass(frozen=True)
class Payer:
    email_address: str = ""
    payer_id: str = ""
    given_name: str = ""
    surname: str = ""

    def to_dict(self) -> dict[str, Any]:
        payer: dict[str, Any] = {}
        if self.email_address:
            payer["email_address"] = self.email_address
        if self.payer_id:
            payer["payer_id"] = self.payer_id
        name = {}
        if self.given_name:
            name["given_name"] = self.given_name
        if self.surname:
            name["surname"] = self.surname
        if name:
            payer["name"] = name
        return payer


@dataclass(frozen=True)
class Order:
    id: str
    purchase_units: tuple[PurchaseUnit, ...] = field(default_factory=tuple)
    status: OrderStatus = OrderStatus.CREATED
    intent: OrderIntent = OrderIntent.CAPTURE
    payer: Optional[Payer] = None
    create_time: Optional[datetime] = None
    update_time: Optional[datetime] = None

    def __post_init__(self):
        object.__setattr__(self, "purchase_units", tuple(self.purchase_units))

    def purchase_unit(self, reference_id: str) -> Optional[PurchaseUnit]:
        for unit in self.purchase_units:
            if unit.reference_id == reference_id:
                return unit
        return None

    def to_dict(self) -> dict[str, Any]:
        order: dict[str, Any] = {
            "id": self.id,
            "intent": self.intent.value,
            "status": self.status.value,
            "purchase_units": [unit.to_dict() for unit in self.purchase_units],
        }
        if self.payer is not None:
            order["payer"] = self.payer.to_dict()
        if self.create_time is not None:
            order["create_time"] = self.create_time.isoformat()
        if self.update_time is not None:
            order["update_time"] = self.update_time.isoformat()
        return order
