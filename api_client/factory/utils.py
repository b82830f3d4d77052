from typing import Any

from api_client.exceptions import PayPalError


def ensure_object(data: Any, entity: str) -> dict[str, Any]:
    """PayPal always answers with a JSON object; anything else is malformed."""
    if not isinstance(data, dict):
        raise PayPalError(f"{entity} response is not an object.")
    return data


def require(data: dict[str, Any], key: str, entity: str) -> Any:
    """Return data[key] or fail the whole mapping."""
    if not isinstance(data, dict) or key not in data or data[key] in (None, ""):
        raise PayPalError(f"{entity} response does not contain {key}.")
    return data[key]
