"""
Shared kernel value objects.

These types are the only vocabulary exchanged between the CRM and Sales
bounded contexts. Each one is immutable and validates itself on
construction, so an instance that exists is always valid.

Design Decisions:
- Frozen dataclasses give value-based equality and hashing for free
- Decimal for all monetary amounts to avoid floating-point errors
- Currency fraction digits come from a local ISO 4217 table
- Money.zero() is pinned to USD; sales totals inherit that seed
"""

import decimal
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar, Self

from ..errors import InvalidArgumentError
from ..validation import require_not_blank, require_present


# ISO 4217 minor units (number of digits after the decimal separator)
ISO_4217_FRACTION_DIGITS: dict[str, int] = {
    "AED": 2,
    "ARS": 2,
    "AUD": 2,
    "BHD": 3,
    "BRL": 2,
    "CAD": 2,
    "CHF": 2,
    "CLP": 0,
    "CNY": 2,
    "COP": 2,
    "CZK": 2,
    "DKK": 2,
    "EUR": 2,
    "GBP": 2,
    "HKD": 2,
    "HUF": 2,
    "IDR": 2,
    "ILS": 2,
    "INR": 2,
    "ISK": 0,
    "JOD": 3,
    "JPY": 0,
    "KRW": 0,
    "KWD": 3,
    "MXN": 2,
    "NOK": 2,
    "NZD": 2,
    "OMR": 3,
    "PEN": 2,
    "PHP": 2,
    "PLN": 2,
    "SEK": 2,
    "SGD": 2,
    "THB": 2,
    "TND": 3,
    "TRY": 2,
    "USD": 2,
    "VND": 0,
    "ZAR": 2,
}

DEFAULT_CURRENCY_CODE = "USD"


def _coerce_uuid(value: Any, label: str) -> uuid.UUID:
    """Accept a UUID or its text form; reject anything else."""
    require_present(value, f"{label} cannot be null")
    if isinstance(value, uuid.UUID):
        return value
    if isinstance(value, str):
        try:
            return uuid.UUID(value)
        except ValueError:
            raise InvalidArgumentError(f"{label} is not a valid UUID: {value!r}") from None
    raise InvalidArgumentError(f"{label} must be a UUID, got {type(value).__name__}")


@dataclass(frozen=True)
class Identifier:
    """
    Base for UUID-backed identity values.

    Subclasses set ``label`` for error messages. Text UUIDs are parsed
    on construction so two identifiers for the same UUID compare equal.
    """
    value: uuid.UUID

    label: ClassVar[str] = "Identifier"

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _coerce_uuid(self.value, self.label))

    @classmethod
    def generate(cls) -> Self:
        """Create an identifier with a fresh random UUID."""
        return cls(uuid.uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class CustomerId(Identifier):
    """
    Identity of a customer, shared between CRM and Sales.

    Sales refers to customers only through this value, never through
    the Customer aggregate itself.
    """
    label: ClassVar[str] = "Customer ID"


@dataclass(frozen=True)
class Address:
    """
    A physical address.

    All five parts are required and must contain non-whitespace text.
    Addresses are replaced wholesale, never edited.
    """
    street: str
    number: str
    city: str
    postal_code: str
    country: str

    def __post_init__(self) -> None:
        """Validate that every part is present and non-blank."""
        require_not_blank(self.street, "Street cannot be null or blank")
        require_not_blank(self.number, "Number cannot be null or blank")
        require_not_blank(self.city, "City cannot be null or blank")
        require_not_blank(self.postal_code, "Postal code cannot be null or blank")
        require_not_blank(self.country, "Country cannot be null or blank")

    def __str__(self) -> str:
        return f"{self.street} {self.number}, {self.city}, {self.postal_code}, {self.country}"


@dataclass(frozen=True)
class Currency:
    """
    An ISO 4217 currency and the number of decimal places it supports.

    Only codes in ISO_4217_FRACTION_DIGITS exist, and fraction_digits must
    match the table, so one code always means one currency.
    """
    code: str
    fraction_digits: int

    def __post_init__(self) -> None:
        require_not_blank(self.code, "Currency code cannot be null or blank")
        if isinstance(self.fraction_digits, bool) or not isinstance(self.fraction_digits, int):
            raise InvalidArgumentError(
                f"Fraction digits must be an integer, got {type(self.fraction_digits).__name__}"
            )

        expected = ISO_4217_FRACTION_DIGITS.get(self.code)
        if expected is None:
            raise InvalidArgumentError(f"Unknown currency code: {self.code!r}")
        if self.fraction_digits != expected:
            raise InvalidArgumentError(
                f"{self.code} has {expected} fraction digits, got {self.fraction_digits}"
            )

    @classmethod
    def of(cls, code: str | None) -> "Currency":
        """
        Look up a currency by its ISO 4217 code.

        Codes are trimmed and upper-cased before lookup.

        Raises:
            InvalidArgumentError: If the code is blank or not in the table
        """
        normalized = require_not_blank(code, "Currency cannot be null").strip().upper()
        fraction_digits = ISO_4217_FRACTION_DIGITS.get(normalized)
        if fraction_digits is None:
            raise InvalidArgumentError(f"Unknown currency code: {code!r}")
        return cls(normalized, fraction_digits)

    def __str__(self) -> str:
        return self.code


def _coerce_amount(value: Any) -> Decimal:
    require_present(value, "Amount cannot be null or negative")
    if isinstance(value, bool):
        raise InvalidArgumentError("Amount must be a number, got bool")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float, str)):
        # str() keeps floats at their shortest repr: 29.99 -> Decimal("29.99")
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidArgumentError(f"Amount is not a number: {value!r}") from None
    else:
        raise InvalidArgumentError(f"Amount must be a number, got {type(value).__name__}")

    if not amount.is_finite():
        raise InvalidArgumentError(f"Amount must be finite, got {amount}")
    return amount


def _scale(amount: Decimal) -> int:
    """Number of digits after the decimal point, as written."""
    exponent = amount.as_tuple().exponent
    return -exponent if isinstance(exponent, int) and exponent < 0 else 0


@contextmanager
def _exact_arithmetic() -> Iterator[None]:
    """
    Run Decimal arithmetic without silent rounding.

    The default context keeps 28 significant digits; amounts may be longer.
    Any result that would still need rounding raises InvalidArgumentError.
    """
    with decimal.localcontext() as ctx:
        ctx.prec = decimal.MAX_PREC
        ctx.Emax = decimal.MAX_EMAX
        ctx.Emin = decimal.MIN_EMIN
        ctx.traps[decimal.Inexact] = True
        try:
            yield
        except decimal.Inexact:
            raise InvalidArgumentError("Money arithmetic would lose precision") from None


@dataclass(frozen=True)
class Money:
    """
    A non-negative amount of a single currency.

    The amount may not carry more decimal places than the currency
    supports: Money("1.005", "USD") is rejected while Money("1.5", "USD")
    is accepted.

    Example:
        price = Money(Decimal("29.99"), "USD")
        str(price.multiply(2))  # '59.98 USD'
    """
    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        """Coerce inputs and enforce sign and scale rules."""
        amount = _coerce_amount(self.amount)
        if amount < 0:
            raise InvalidArgumentError("Amount cannot be null or negative")
        if amount.is_zero():
            # Decimal("-0.00") is not < 0 but would render with a sign
            amount = amount.copy_abs()

        currency = require_present(self.currency, "Currency cannot be null")
        if isinstance(currency, str):
            currency = Currency.of(currency)
        elif not isinstance(currency, Currency):
            raise InvalidArgumentError(
                f"Currency must be a Currency or code, got {type(currency).__name__}"
            )

        if _scale(amount) > currency.fraction_digits:
            raise InvalidArgumentError(
                "Amount scale cannot be greater than currency fraction digits "
                f"({amount} has {_scale(amount)}, {currency.code} allows {currency.fraction_digits})"
            )

        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "currency", currency)

    @classmethod
    def zero(cls, currency: Currency | str = DEFAULT_CURRENCY_CODE) -> "Money":
        """Zero amount, in USD unless another currency is given."""
        return cls(Decimal(0), currency)

    def add(self, other: "Money") -> "Money":
        """
        Sum two amounts of the same currency.

        Raises:
            InvalidArgumentError: If the currencies differ
        """
        require_present(other, "Cannot add null money")
        if self.currency != other.currency:
            raise InvalidArgumentError(
                "Cannot add money with different currency "
                f"({self.currency.code} vs {other.currency.code})"
            )
        with _exact_arithmetic():
            total = self.amount + other.amount
        return Money(total, self.currency)

    def multiply(self, multiplier: int) -> "Money":
        """
        Scale the amount by an integer.

        A negative multiplier produces a negative amount, which the
        constructor rejects.
        """
        if isinstance(multiplier, bool) or not isinstance(multiplier, int):
            raise InvalidArgumentError(
                f"Multiplier must be an integer, got {type(multiplier).__name__}"
            )
        with _exact_arithmetic():
            product = self.amount * multiplier
        return Money(product, self.currency)

    def __add__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __mul__(self, multiplier: object) -> "Money":
        if not isinstance(multiplier, int):
            return NotImplemented
        return self.multiply(multiplier)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"{self.amount} {self.currency.code}"
