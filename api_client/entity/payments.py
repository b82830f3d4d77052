"""
Payment sub-resources PayPal attaches to a purchase unit once money moves:
authorizations, captures and refunds.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from api_client.entity.money import Money


class AuthorizationStatus(str, Enum):
    CREATED = "CREATED"
    CAPTURED = "CAPTURED"
    DENIED = "DENIED"
    EXPIRED = "EXPIRED"
    PARTIALLY_CAPTURED = "PARTIALLY_CAPTURED"
    VOIDED = "VOIDED"
    PENDING = "PENDING"


class CaptureStatus(str, Enum):
    COMPLETED = "COMPLETED"
    DECLINED = "DECLINED"
    PARTIALLY_REFUNDED = "PARTIALLY_REFUNDED"
    PENDING = "PENDING"
    REFUNDED = "REFUNDED"
    FAILED = "FAILED"


class RefundStatus(str, Enum):
    CANCELLED = "CANCELLED"
    FAILED = "FAILED"
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"


@dataclass(frozen=True)
class Authorization:
    id: str
    status: AuthorizationStatus
    amount: Optional[Money] = None

    def is_capturable(self) -> bool:
        return self.status in (
            AuthorizationStatus.CREATED,
            AuthorizationStatus.PARTIALLY_CAPTURED,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "status": self.status.value}
        if self.amount is not None:
            data["amount"] = self.amount.to_dict()
        return data


@dataclass(frozen=True)
class Capture:
    id: str
    status: CaptureStatus
    amount: Optional[Money] = None
    status_details: str = ""
    final_capture: bool = False
    invoice_id: str = ""
    custom_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "status": self.status.value,
            "final_capture": self.final_capture,
            "invoice_id": self.invoice_id,
            "custom_id": self.custom_id,
        }
        if self.status_details:
            data["status_details"] = {"reason": self.status_details}
        if self.amount is not None:
            data["amount"] = self.amount.to_dict()
        return data


@dataclass(frozen=True)
class Refund:
    id: str
    status: RefundStatus
    amount: Optional[Money] = None
    invoice_id: str = ""
    note_to_payer: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "status": self.status.value}
        if self.amount is not None:
            data["amount"] = self.amount.to_dict()
        if self.invoice_id:
            data["invoice_id"] = self.invoice_id
        if self.note_to_payer:
            data["note_to_payer"] = self.note_to_payer
        return data


@dataclass(frozen=True)
class Payments:
    authorizations: tuple[Authorization, ...] = field(default_factory=tuple)
    captures: tuple[Capture, ...] = field(default_factory=tuple)
    refunds: tuple[Refund, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.authorizations:
            data["authorizations"] = [a.to_dict() for a in self.authorizations]
        if self.captures:
            data["captures"] = [c.to_dict() for c in self.captures]
        if self.refunds:
            data["refunds"] = [r.to_dict() for r in self.refunds]
        return data
