"""Factories for the payments block of a purchase unit."""

from typing import Any

from api_client.entity.payments import (
    Authorization,
    AuthorizationStatus,
    Capture,
    CaptureStatus,
    Payments,
    Refund,
    RefundStatus,
)
from api_client.exceptions import PayPalError
from api_client.factory.money_factory import MoneyFactory
from api_client.factory.utils import ensure_object, require


def _status(enum, data: dict[str, Any], entity: str):
    raw = require(data, "status", entity)
    try:
        return enum(raw)
    except ValueError as exc:
        raise PayPalError(f"{entity} status {raw!r} is not valid.") from exc


class AuthorizationsFactory:
    def __init__(self, money_factory: MoneyFactory | None = None):
        self.money_factory = money_factory or MoneyFactory()

    def from_paypal_response(self, data: dict[str, Any]) -> Authorization:
        data = ensure_object(data, "Authorization")
        amount = None
        if data.get("amount"):
            amount = self.money_factory.from_paypal_response(data["amount"])
        return Authorization(
            id=require(data, "id", "Authorization"),
            status=_status(AuthorizationStatus, data, "Authorization"),
            amount=amount,
        )


class CaptureFactory:
    def __init__(self, money_factory: MoneyFactory | None = None):
        self.money_factory = money_factory or MoneyFactory()

    def from_paypal_response(self, data: dict[str, Any]) -> Capture:
        data = ensure_object(data, "Capture")
        amount = None
        if data.get("amount"):
            amount = self.money_factory.from_paypal_response(data["amount"])
        return Capture(
            id=require(data, "id", "Capture"),
            status=_status(CaptureStatus, data, "Capture"),
            amount=amount,
            status_details=(data.get("status_details") or {}).get("reason", ""),
            final_capture=bool(data.get("final_capture", False)),
            invoice_id=data.get("invoice_id", ""),
            custom_id=data.get("custom_id", ""),
        )


class RefundFactory:
    def __init__(self, money_factory: MoneyFactory | None = None):
        self.money_factory = money_factory or MoneyFactory()

    def from_paypal_response(self, data: dict[str, Any]) -> Refund:
        data = ensure_object(data, "Refund")
        amount = None
        if data.get("amount"):
            amount = self.money_factory.from_paypal_response(data["amount"])
        return Refund(
            id=require(data, "id", "Refund"),
            status=_status(RefundStatus, data, "Refund"),
            amount=amount,
            invoice_id=data.get("invoice_id", ""),
            note_to_payer=data.get("note_to_payer", ""),
        )


class PaymentsFactory:
    def __init__(
        self,
        authorizations_factory: AuthorizationsFactory | None = None,
        capture_factory: CaptureFactory | None = None,
        refund_factory: RefundFactory | None = None,
    ):
        self.authorizations_factory = authorizations_factory or AuthorizationsFactory()
        self.capture_factory = capture_factory or CaptureFactory()
        self.refund_factory = refund_factory or RefundFactory()

    def from_paypal_response(self, data: dict[str, Any]) -> Payments:
        data = ensure_object(data, "Payments")
        return Payments(
            authorizations=tuple(
                self.authorizations_factory.from_paypal_response(a)
                for a in data.get("authorizations") or []
            ),
            captures=tuple(
                self.capture_factory.from_paypal_response(c)
                for c in data.get("captures") or []
            ),
            refunds=tuple(
                self.refund_factory.from_paypal_response(r)
                for r in data.get("refunds") or []
            ),
        )
