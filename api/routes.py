"""
API Routes Module

This module defines the AJAX routes the checkout script talks to:
- Script configuration (endpoint and nonce)
- PayPal order creation for the cart or a stored order
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from api.schemas import CreateOrderRequest
from checkout.create_order import CreateOrderHandler, error_response
from checkout.nonce import create_nonce
from core.dependencies import get_create_order_handler, get_settings
from core.settings import Settings

router = APIRouter()

CREATE_ORDER_PATH = "/ajax/create-order"


@router.get("/ajax/script-data")
async def script_data(request: Request, settings: Settings = Depends(get_settings)):
    """Configuration the checkout script is rendered with."""
    return {
        "ajax": {
            "create_order": {
                "endpoint": str(request.url_for("create_order")),
                "nonce": create_nonce(settings.NONCE_SECRET),
            }
        },
        "bn_codes": {"checkout": settings.PAYPAL_BN_CODE} if settings.PAYPAL_BN_CODE else {},
        "vault_enabled": settings.VAULT_ENABLED,
    }


@router.post(CREATE_ORDER_PATH, name="create_order")
async def create_order(
    request: Request,
    handler: CreateOrderHandler = Depends(get_create_order_handler),
):
    """Create a PayPal order and answer in the store's AJAX envelope."""
    # The checkout script does not always send a JSON content type
    body = await request.body()
    try:
        payload = CreateOrderRequest.model_validate_json(body or b"{}")
    except ValidationError:
        return JSONResponse(status_code=400, content=error_response("Could not read request."))
    # PayPal calls block; run them off the event loop
    return await run_in_threadpool(handler.handle, payload)
