"""
PayPal Commerce Checkout - Main Application Entry Point

This module initializes the FastAPI application serving the AJAX endpoints
of the PayPal checkout buttons: the script configuration and order creation
for the shopper's cart or a stored order.
"""

import structlog
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from api import routes
from api.middleware import log_api_entry
from core.dependencies import clear_settings, get_settings, init_settings
from core.logging import configure_logging
from core.settings import Settings

log = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI application startup and shutdown events."""
    # Startup
    init_settings()
    settings = get_settings()
    log.info(
        "app.startup",
        environment=settings.ENVIRONMENT,
        paypal_host=settings.PAYPAL_HOST,
        intent=settings.PAYPAL_INTENT,
    )

    yield
    # Shutdown
    clear_settings()


app = FastAPI(
    title="PayPal Commerce Checkout",
    description="""
    ## PayPal checkout backend for a WooCommerce-style store

    ### Key Features:
    - **Order creation**: maps the cart or a stored order to a PayPal purchase unit
    - **Vaulting**: pays with PayPal accounts and cards the customer saved before
    - **Subscriptions**: merchant-initiated renewals with stored credentials
    """,
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# Add logging middleware first
app.middleware("http")(log_api_entry)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    log.exception("app.unhandled_error", path=request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": str(exc)},
    )


@app.get("/health")
async def health(settings: Settings = Depends(get_settings)):
    """Health check endpoint alias."""
    return await health_check(settings)


@app.get("/healthz")
async def health_check(settings: Settings = Depends(get_settings)):
    """Health check endpoint to verify API status."""
    return {
        "status": "ok",
        "app_name": settings.APP_NAME,
        "paypal_host": settings.PAYPAL_HOST,
        "environment": settings.ENVIRONMENT,
    }


app.include_router(routes.router)


def main():
    configure_logging()
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
