"""
OAuth2 bearer tokens for the PayPal REST API.

Endpoints only depend on the Bearer protocol; PayPalBearer is the
client-credentials implementation that caches the token until shortly
before it expires.
"""

from typing import Optional, Protocol

import requests
import structlog
import tenacity

from api_client.entity.token import Token
from api_client.exceptions import PayPalError
from core.logging import BusinessEvents

log = structlog.get_logger(__name__)


class Bearer(Protocol):
    def bearer(self) -> str: ...


class PayPalBearer:
    def __init__(
        self,
        host: str,
        client_id: str,
        secret: str,
        session: Optional[requests.Session] = None,
        timeout: float = 30.0,
    ):
        self.host = host.rstrip("/")
        self.client_id = client_id
        self.secret = secret
        self.session = session or requests.Session()
        self.timeout = timeout
        self._token: Optional[Token] = None

    def bearer(self) -> str:
        """Return a valid access token, fetching a new one when needed."""
        if self._token is not None and self._token.is_valid():
            return self._token.token

        try:
            response = self._request_token()
        except requests.RequestException as e:
            log.error(BusinessEvents.PAYPAL_REQUEST_FAILED, url=self._url(), error=str(e))
            raise PayPalError("Could not create token.") from e

        if response.status_code != 200:
            log.error(
                BusinessEvents.PAYPAL_REQUEST_FAILED,
                url=self._url(),
                status_code=response.status_code,
            )
            raise PayPalError("Could not create token.")

        try:
            self._token = Token.from_response(response.json())
        except (KeyError, TypeError, ValueError) as e:
            raise PayPalError("Could not create token.") from e

        log.info(
            BusinessEvents.PAYPAL_TOKEN_REFRESHED,
            expires_at=self._token.expires_at.isoformat(),
        )
        return self._token.token

    def reset(self) -> None:
        """Drop the cached token, e.g. after PayPal rejected it."""
        self._token = None

    def _url(self) -> str:
        return f"{self.host}/v1/oauth2/token"

    @tenacity.retry(
        stop=tenacity.stop_after_attempt(3),
        wait=tenacity.wait_exponential(multiplier=1, min=1, max=8),
        retry=tenacity.retry_if_exception_type(requests.ConnectionError),
        reraise=True,
    )
    def _request_token(self) -> requests.Response:
        return self.session.post(
            self._url(),
            auth=(self.client_id, self.secret),
            data={"grant_type": "client_credentials"},
            headers={"Accept": "application/json"},
            timeout=self.timeout,
        )
