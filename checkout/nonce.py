"""
Request nonces for the checkout AJAX endpoints.

Like WordPress nonces they are tied to an action and valid for the current
and the previous twelve hour tick.
"""

import hashlib
import hmac
import time

CREATE_ORDER_ACTION = "ppcp-create-order"
TICK_SECONDS = 12 * 60 * 60


def _tick(now: float | None = None) -> int:
    return int((time.time() if now is None else now) // TICK_SECONDS)


def _digest(secret: str, action: str, tick: int) -> str:
    message = f"{tick}|{action}".encode()
    return hmac.new(secret.encode(), message, hashlib.sha256).hexdigest()[:10]


def create_nonce(secret: str, action: str = CREATE_ORDER_ACTION, now: float | None = None) -> str:
    return _digest(secret, action, _tick(now))


def verify_nonce(
    nonce: str, secret: str, action: str = CREATE_ORDER_ACTION, now: float | None = None
) -> bool:
    if not nonce:
        return False
    tick = _tick(now)
    return any(
        hmac.compare_digest(nonce.encode(), _digest(secret, action, t).encode())
        for t in (tick, tick - 1)
    )
