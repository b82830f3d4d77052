import logging
import os
import sys

import structlog


def get_log_level():
    """Get log level from environment or default to INFO"""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_renderer():
    """Get log renderer based on environment"""
    env = os.getenv("ENVIRONMENT", "development")
    # Use JSON format for tests and production
    if env in ["test", "production"]:
        return structlog.processors.JSONRenderer()
    # Pretty printing for local development
    return structlog.dev.ConsoleRenderer(colors=True, sort_keys=False)


def drop_credentials(logger, method_name, event_dict):
    """Never let bearer tokens or client secrets reach a log sink."""
    for key in ("token", "access_token", "secret", "authorization"):
        if key in event_dict:
            event_dict[key] = "***"
    return event_dict


def configure_logging():
    """Set up structlog on top of the stdlib logging module."""
    shared_processors = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.ExceptionPrettyPrinter(),
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            drop_credentials,
            get_log_renderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    env = os.getenv("ENVIRONMENT", "development")
    if env == "test":
        # In test mode, write to stdout for easier capture
        handler = logging.StreamHandler(sys.stdout)
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]  # Replace any existing handlers
    root_logger.setLevel(get_log_level())

    # Silence Uvicorn noise but keep access logs routed through structlog
    logging.getLogger("uvicorn.error").handlers.clear()
    logging.getLogger("uvicorn.access").handlers.clear()


# Business Event Log Names
class BusinessEvents:
    """Standard names for business event logs"""

    API_ENTRY = "api.request"
    API_EXIT = "api.response"
    PAYPAL_REQUEST = "paypal.request"
    PAYPAL_RESPONSE = "paypal.response"
    PAYPAL_REQUEST_FAILED = "paypal.request_failed"
    PAYPAL_TOKEN_REFRESHED = "paypal.token_refreshed"
    ORDER_CREATED = "checkout.order_created"
    ORDER_FAILED = "checkout.order_failed"
    CREATE_ORDER_REQUEST_FAILED = "checkout.create_order_request_failed"
    SUBSCRIPTION_TOKEN_LINKED = "subscription.token_linked"
    SUBSCRIPTION_TOKEN_FAILED = "subscription.token_failed"


# Configure logging when module is imported
configure_logging()
