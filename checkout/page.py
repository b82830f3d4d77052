"""
Server-rendered stand-ins for the pieces of the checkout page the button
script touches: the forms, the spinner and the notice area.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag


@dataclass
class CheckoutForm:
    selector: str
    fields: dict[str, Any] = field(default_factory=dict)
    hidden: dict[str, str] = field(default_factory=dict)


class CheckoutPage:
    """Forms on the page, keyed by their CSS selector."""

    def __init__(self, forms: Optional[list[CheckoutForm]] = None):
        self.forms = {form.selector: form for form in forms or []}

    def form(self, selector: str) -> CheckoutForm:
        if selector not in self.forms:
            self.forms[selector] = CheckoutForm(selector)
        return self.forms[selector]

    def form_data(self, selector: str) -> dict[str, Any]:
        form = self.form(selector)
        return {**form.fields, **form.hidden}

    def append_hidden_input(self, selector: str, name: str, value: str) -> None:
        # Same-name inputs replace each other, a resubmit leaves one field
        self.form(selector).hidden[name] = value

    def render_hidden_inputs(self, selector: str) -> str:
        soup = BeautifulSoup("", "html.parser")
        for name, value in self.form(selector).hidden.items():
            soup.append(soup.new_tag("input", attrs={"type": "hidden", "name": name, "value": value}))
        return str(soup)


class Spinner:
    def __init__(self):
        self.blocked = False

    def block(self) -> None:
        self.blocked = True

    def unblock(self) -> None:
        self.blocked = False


class ErrorHandler:
    """Collects the notices shown above the checkout form."""

    GENERIC_MESSAGE = "Something went wrong. Please try again or choose another payment source."

    def __init__(self, generic_message: str = GENERIC_MESSAGE):
        self.generic_message = generic_message
        self.messages: list[str] = []

    def generic_error(self) -> None:
        self.clear()
        self.message(self.generic_message)

    def append_prepared_error_message_element(self, element: Tag) -> None:
        self.messages.extend(li.decode_contents() for li in element.find_all("li"))

    def message(self, text: str, persist: bool = False) -> None:
        if not persist:
            self.clear()
        self.messages.append(text)

    def clear(self) -> None:
        self.messages.clear()
