from typing import Optional

from api_client.entity.money import Money
from api_client.entity.payments import Authorization, Capture, Refund
from api_client.exceptions import PayPalError
from api_client.endpoint.request import PayPalEndpoint
from api_client.factory.payments_factory import (
    AuthorizationsFactory,
    CaptureFactory,
    RefundFactory,
)


class PaymentsEndpoint(PayPalEndpoint):
    """Authorizations, captures and refunds under ``v2/payments``.

    Failures raise PayPalError with a fixed message; PayPal's error body is
    logged but never surfaced to the caller.
    """

    def __init__(
        self,
        host,
        bearer,
        authorizations_factory: AuthorizationsFactory,
        error_response_factory=None,
        capture_factory: CaptureFactory | None = None,
        refund_factory: RefundFactory | None = None,
        session=None,
        timeout: float = 30.0,
    ):
        super().__init__(host, bearer, error_response_factory, session, timeout)
        self.authorizations_factory = authorizations_factory
        self.capture_factory = capture_factory or CaptureFactory()
        self.refund_factory = refund_factory or RefundFactory()

    def _expect(self, response, status_code: int, fail_message: str):
        if response.status_code != status_code:
            raise PayPalError(fail_message) from self.error_exception(
                response, fail_message
            )

    def authorization(self, authorization_id: str) -> Authorization:
        fail = "Could not get authorized payment info."
        response = self.send("GET", f"payments/authorizations/{authorization_id}", fail)
        self._expect(response, 200, fail)
        return self.authorizations_factory.from_paypal_response(
            self.decode(response, fail)
        )

    def capture_authorization(self, authorization_id: str) -> Capture:
        fail = "Could not capture authorized payment."
        response = self.send(
            "POST", f"payments/authorizations/{authorization_id}/capture", fail
        )
        self._expect(response, 201, fail)
        return self.capture_factory.from_paypal_response(self.decode(response, fail))

    def void_authorization(self, authorization_id: str) -> None:
        fail = "Could not void authorized payment."
        response = self.send(
            "POST", f"payments/authorizations/{authorization_id}/void", fail
        )
        self._expect(response, 204, fail)

    def capture(self, capture_id: str) -> Capture:
        fail = "Could not get captured payment info."
        response = self.send("GET", f"payments/captures/{capture_id}", fail)
        self._expect(response, 200, fail)
        return self.capture_factory.from_paypal_response(self.decode(response, fail))

    def refund(
        self,
        capture_id: str,
        amount: Optional[Money] = None,
        note_to_payer: str = "",
        invoice_id: str = "",
    ) -> Refund:
        """Refund a capture; without an amount the whole capture is refunded."""
        fail = "Could not refund payment."
        body = {}
        if amount is not None:
            body["amount"] = amount.to_dict()
        if note_to_payer:
            body["note_to_payer"] = note_to_payer
        if invoice_id:
            body["invoice_id"] = invoice_id

        response = self.send(
            "POST", f"payments/captures/{capture_id}/refund", fail, json_body=body
        )
        self._expect(response, 201, fail)
        return self.refund_factory.from_paypal_response(self.decode(response, fail))
