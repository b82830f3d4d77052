from typing import Any

from api_client.entity.error_response import (
    ErrorDetail,
    ErrorResponse,
    ErrorResponseCollection,
)
from api_client.exceptions import PayPalApiError


class ErrorResponseCollectionFactory:
    """Parses PayPal error bodies.

    PayPal answers either with one error object
    (``{"name", "message", "debug_id", "details": [...]}``) or, for OAuth
    failures, with ``{"error", "error_description"}``.
    """

    def from_paypal_response(
        self, data: Any, status_code: int | None = None, url: str = ""
    ) -> ErrorResponseCollection:
        if not isinstance(data, dict):
            return ErrorResponseCollection()

        if "error" in data and "name" not in data:
            return ErrorResponseCollection(
                errors=(
                    ErrorResponse(
                        name=str(data["error"]),
                        message=data.get("error_description", ""),
                        status_code=status_code,
                        url=url,
                    ),
                )
            )

        details = tuple(
            ErrorDetail(
                issue=d.get("issue", ""),
                description=d.get("description", ""),
                field=d.get("field", ""),
            )
            for d in data.get("details") or []
            if isinstance(d, dict)
        )
        return ErrorResponseCollection(
            errors=(
                ErrorResponse(
                    name=data.get("name", ""),
                    message=data.get("message", ""),
                    debug_id=data.get("debug_id", ""),
                    status_code=status_code,
                    url=url,
                    details=details,
                ),
            )
        )

    def to_exception(
        self,
        collection: ErrorResponseCollection,
        fallback_message: str,
        status_code: int | None = None,
    ) -> PayPalApiError:
        error = collection.first()
        if error is None:
            return PayPalApiError(fallback_message, status_code=status_code)
        return PayPalApiError(
            error.message or fallback_message,
            status_code=error.status_code,
            name=error.name,
            debug_id=error.debug_id,
            details=error.details_as_dicts(),
        )
