"""
Shared request handling for the PayPal v2 endpoints.

Every call carries the bearer token and the fixed JSON headers, goes to
``<host>/v2/<path>`` and is logged with PayPal's debug id. Transport errors
become PayPalError with the caller's user-facing message; checking the
status code is left to the endpoint because each operation has its own
success code.
"""

from typing import Any, Optional

import requests
import structlog

from api_client.authentication import Bearer
from api_client.exceptions import PayPalError
from api_client.factory.error_response_collection_factory import (
    ErrorResponseCollectionFactory,
)
from core.logging import BusinessEvents

log = structlog.get_logger(__name__)


class PayPalEndpoint:
    def __init__(
        self,
        host: str,
        bearer: Bearer,
        error_response_factory: ErrorResponseCollectionFactory | None = None,
        session: Optional[requests.Session] = None,
        timeout: float = 30.0,
    ):
        self.host = host.rstrip("/")
        self.bearer = bearer
        self.error_response_factory = (
            error_response_factory or ErrorResponseCollectionFactory()
        )
        self.session = session or requests.Session()
        self.timeout = timeout

    def url(self, path: str) -> str:
        return f"{self.host}/v2/{path.lstrip('/')}"

    def headers(self, extra: Optional[dict[str, str]] = None) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self.bearer.bearer()}",
            "Content-Type": "application/json",
            "Prefer": "return=representation",
        }
        if extra:
            headers.update(extra)
        return headers

    def send(
        self,
        method: str,
        path: str,
        fail_message: str,
        json_body: Any = None,
        params: Optional[dict[str, str]] = None,
        extra_headers: Optional[dict[str, str]] = None,
    ) -> requests.Response:
        url = self.url(path)
        headers = self.headers(extra_headers)
        log.info(BusinessEvents.PAYPAL_REQUEST, method=method, url=url)
        try:
            response = self.session.request(
                method,
                url,
                headers=headers,
                json=json_body,
                params=params,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            log.error(
                BusinessEvents.PAYPAL_REQUEST_FAILED, method=method, url=url, error=str(e)
            )
            raise PayPalError(fail_message) from e

        log.info(
            BusinessEvents.PAYPAL_RESPONSE,
            method=method,
            url=url,
            status_code=response.status_code,
            debug_id=(response.headers or {}).get("PayPal-Debug-Id", ""),
        )
        return response

    def decode(self, response: requests.Response, fail_message: str) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise PayPalError(fail_message) from e
        if not isinstance(data, dict):
            raise PayPalError(fail_message)
        return data

    def error_exception(
        self, response: requests.Response, fail_message: str
    ) -> PayPalError:
        """Log PayPal's error body and turn it into a PayPalApiError."""
        try:
            body = response.json()
        except ValueError:
            body = None
        collection = self.error_response_factory.from_paypal_response(
            body, status_code=response.status_code, url=str(response.url)
        )
        error = collection.first()
        log.warning(
            BusinessEvents.PAYPAL_REQUEST_FAILED,
            url=str(response.url),
            status_code=response.status_code,
            name=error.name if error else "",
            debug_id=error.debug_id if error else "",
            issues=[d.issue for d in error.details] if error else [],
        )
        return self.error_response_factory.to_exception(
            collection, fail_message, status_code=response.status_code
        )
