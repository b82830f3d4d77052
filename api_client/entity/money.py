"""
Money value object.

PayPal expects amounts as strings with a fixed number of decimal places per
currency: most currencies use two, a handful use none.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

# https://developer.paypal.com/api/rest/reference/currency-codes/
ZERO_DECIMAL_CURRENCIES = frozenset({"HUF", "JPY", "TWD"})

Numeric = Union[Decimal, int, float, str]


def decimal_places(currency_code: str) -> int:
    return 0 if currency_code.upper() in ZERO_DECIMAL_CURRENCIES else 2


def round_for_currency(value: Numeric, currency_code: str) -> Decimal:
    """Quantize a value to the precision PayPal accepts for the currency."""
    if isinstance(value, float):
        # str() first so 0.1 stays 0.1 instead of its binary expansion
        value = str(value)
    exponent = Decimal(1).scaleb(-decimal_places(currency_code))
    return Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Money:
    """Immutable monetary value in a single currency."""

    value: Decimal
    currency_code: str

    def __init__(self, value: Numeric, currency_code: str):
        if not isinstance(currency_code, str) or len(currency_code) != 3:
            raise ValueError(
                f"Currency must be 3-letter ISO code, got: {currency_code!r}"
            )
        currency_code = currency_code.upper()
        object.__setattr__(self, "currency_code", currency_code)
        object.__setattr__(self, "value", round_for_currency(value, currency_code))

    def __str__(self) -> str:
        return f"{self.value_str()} {self.currency_code}"

    def _check_currency(self, other: "Money") -> None:
        if self.currency_code != other.currency_code:
            raise ValueError(
                f"Cannot combine different currencies: "
                f"{self.currency_code} vs {other.currency_code}"
            )

    def __add__(self, other: "Money") -> "Money":
        self._check_currency(other)
        return Money(self.value + other.value, self.currency_code)

    def __sub__(self, other: "Money") -> "Money":
        self._check_currency(other)
        return Money(self.value - other.value, self.currency_code)

    def __mul__(self, quantity: int) -> "Money":
        if not isinstance(quantity, int):
            return NotImplemented
        return Money(self.value * quantity, self.currency_code)

    __rmul__ = __mul__

    def __neg__(self) -> "Money":
        return Money(-self.value, self.currency_code)

    def is_negative(self) -> bool:
        return self.value < 0

    def is_zero(self) -> bool:
        return self.value == 0

    def value_str(self) -> str:
        return f"{self.value:.{decimal_places(self.currency_code)}f}"

    @classmethod
    def zero(cls, currency_code: str) -> "Money":
        return cls(0, currency_code)

    def to_dict(self) -> dict[str, str]:
        return {"currency_code": self.currency_code, "value": self.value_str()}
