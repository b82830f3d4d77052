"""
API Schemas Module

Pydantic models for the checkout AJAX request bodies.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CreateOrderRequest(BaseModel):
    """Body the checkout button posts to the create-order endpoint."""

    nonce: str = ""
    payer: Optional[dict[str, Any]] = None
    bn_code: str = ""
    context: str = "checkout"
    order_id: Optional[int] = None
    payment_method: str = ""
    funding_source: Optional[str] = None
    form: dict[str, Any] = Field(default_factory=dict)
    createaccount: bool = False

    # Set when an admin processes a subscription renewal by hand
    wc_order_action: str = ""
    post_ID: Optional[int] = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("order_id", "post_ID", mode="before")
    @classmethod
    def empty_id_is_none(cls, value):
        # The page sends "" or 0 when there is no stored order yet
        if value in ("", 0, "0", None):
            return None
        return value


class ErrorDetail(BaseModel):
    issue: str
    description: str = ""


class CreateOrderError(BaseModel):
    name: str = ""
    message: str
    code: int = 0
    details: list[ErrorDetail] = Field(default_factory=list)
