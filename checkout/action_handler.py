"""
Checkout button callbacks

Python rendition of the checkout script's action handler: the external button
library calls create_order when the shopper clicks, and we ask our backend to
create the PayPal order for the current cart or order.
"""

from typing import Any, Callable, Optional

import requests
import structlog
from bs4 import BeautifulSoup

from checkout.page import CheckoutPage, ErrorHandler, Spinner
from core.logging import BusinessEvents

log = structlog.get_logger(__name__)

RESUME_ORDER_FIELD = "ppcp-resume-order"
CHECKOUT_FORM = "form.checkout"
ORDER_REVIEW_FORM = "form#order_review"


class CheckoutActionHandler:
    def __init__(
        self,
        config: dict[str, Any],
        error_handler: ErrorHandler,
        spinner: Spinner,
        page: CheckoutPage,
        on_approve: Optional[Callable[..., Any]] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            config: script configuration (context, bn_codes, order_id and
                ajax.create_order.endpoint/nonce)
            on_approve: the button library's approve handler, called as is
        """
        self.config = config
        self.error_handler = error_handler
        self.spinner = spinner
        self.page = page
        self.on_approve = on_approve
        self.session = session or requests.Session()
        self.payment_method = config.get("payment_method", "ppcp-gateway")

    def configuration(self) -> dict[str, Callable[..., Any]]:
        return {
            "create_order": self.create_order,
            "on_approve": self.on_approve,
            "on_cancel": self.on_cancel,
            "on_error": self.on_error,
        }

    def form_selector(self) -> str:
        if self.config.get("context") == "checkout":
            return CHECKOUT_FORM
        return ORDER_REVIEW_FORM

    def create_order(self, data: dict[str, Any], actions: Any = None) -> Optional[str]:
        self.spinner.block()

        context = self.config.get("context", "")
        selector = self.form_selector()
        form = self.page.form_data(selector)
        body = {
            "nonce": self.config["ajax"]["create_order"]["nonce"],
            "payer": data.get("payer"),
            "bn_code": self.config.get("bn_codes", {}).get(context, ""),
            "context": context,
            "order_id": self.config.get("order_id"),
            "payment_method": self.payment_method,
            "funding_source": data.get("funding_source"),
            "form": form,
            "createaccount": bool(form.get("createaccount")),
        }

        try:
            response = self.session.post(
                self.config["ajax"]["create_order"]["endpoint"],
                json=body,
                timeout=self.config.get("timeout", 30),
            )
            result = response.json()
        except (requests.RequestException, ValueError) as e:
            log.warning(BusinessEvents.CREATE_ORDER_REQUEST_FAILED, error=str(e))
            self.on_error(e)
            return None

        if not result.get("success"):
            self.spinner.unblock()
            self.show_errors(result)
            return None

        order = result["data"]
        self.page.append_hidden_input(
            selector, RESUME_ORDER_FIELD, order["purchase_units"][0].get("custom_id", "")
        )
        return order["id"]

    def show_errors(self, result: dict[str, Any]) -> None:
        # Store notices (field validation) come as ready-made HTML
        if result.get("messages") is not None:
            soup = BeautifulSoup(result["messages"], "html.parser")
            element = soup.find("ul")
            if element is not None:
                self.error_handler.append_prepared_error_message_element(element)
            return

        self.error_handler.clear()
        data = result.get("data") or {}
        details = data.get("details") or []
        if details:
            self.error_handler.message(
                "<br/>".join(f"{d.get('issue', '')} {d.get('description', '')}" for d in details),
                True,
            )
        else:
            self.error_handler.message(data.get("message", ""), True)

    def on_cancel(self, *args) -> None:
        self.spinner.unblock()

    def on_error(self, *args) -> None:
        self.error_handler.generic_error()
        self.spinner.unblock()
