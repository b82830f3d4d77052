"""Domain errors raised by the PayPal API client."""

from typing import Any


class PayPalError(RuntimeError):
    """A PayPal call or mapping could not produce a usable result.

    Raised for transport failures, unexpected status codes and responses
    that miss a required field. The message is safe to show to a shopper.
    """


class PayPalApiError(PayPalError):
    """PayPal answered with an error body."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        name: str = "",
        debug_id: str = "",
        details: list[dict[str, Any]] | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.name = name
        self.debug_id = debug_id
        self.details = details or []

    def issues(self) -> list[str]:
        return [d.get("issue", "") for d in self.details]

    def has_issue(self, issue: str) -> bool:
        return issue in self.issues()
