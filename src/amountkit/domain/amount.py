"""The Amount value type: exact minor units in a single currency.

INVARIANT: minor units are always a Python ``int``. No operation accepts
or produces a float, and nothing is ever rounded.

INVARIANT: binary operations (add, subtract, ordering, totals) require
equal currencies and raise :class:`CurrencyMismatchError` otherwise.
Equality never raises: amounts in different currencies are simply unequal.

Amounts are frozen pydantic models, so every operation returns a new
instance and instances are hashable.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any, Self

from pydantic import BaseModel, StrictInt, field_validator

from amountkit.domain.currency import CURRENCY_SPECS, Currency, resolve_currency
from amountkit.domain.errors import (
    AmountOverflowError,
    CurrencyMismatchError,
    InexactAmountError,
)

logger = logging.getLogger(__name__)


class Amount(BaseModel):
    """An exact monetary amount.

    Attributes:
        minor_units: Quantity in the currency's smallest denomination
            (cents for USD). Negative values are valid balances.
        currency: The currency. Accepts a :class:`Currency`, an ISO code in
            any case, or an alias such as ``"dollar"`` or ``"€"``.

    ``model_copy`` re-validates its update. ``model_construct`` is pydantic's
    unvalidated constructor and must not be used to build amounts.
    """

    model_config = {"frozen": True}

    minor_units: StrictInt
    currency: Currency

    @field_validator("currency", mode="before")
    @classmethod
    def normalize_currency(cls, value: Any) -> Any:
        if isinstance(value, str):
            return resolve_currency(value)
        return value

    # --- Construction ---

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Self:
        """Return a validated copy with *update* applied."""
        return type(self).model_validate({**self.model_dump(), **(update or {})})

    @classmethod
    def of(cls, minor_units: int, currency: Currency | str) -> Self:
        """Positional shorthand for ``Amount(minor_units=..., currency=...)``."""
        return cls(minor_units=minor_units, currency=currency)

    @classmethod
    def zero(cls, currency: Currency | str) -> Self:
        return cls(minor_units=0, currency=currency)

    @classmethod
    def total(cls, amounts: Iterable[Amount], *, currency: Currency | str) -> Self:
        """Sum *amounts* exactly; an empty iterable totals to zero in *currency*."""
        result = cls.zero(currency)
        for amount in amounts:
            if not isinstance(amount, Amount):
                raise TypeError(f"cannot total Amount with {type(amount).__name__}")
            result._require_same_currency(amount, "total")
            result = result._with(result.minor_units + amount.minor_units)
        return result

    @classmethod
    def from_major(cls, value: int | Decimal, currency: Currency | str) -> Self:
        """Convert a major-unit value to an amount without rounding.

        ``Amount.from_major(Decimal("10.50"), "USD")`` is 1050 cents.

        Raises:
            TypeError: *value* is not an ``int`` or ``Decimal``. Floats are
                refused outright since they cannot carry exact cents.
            InexactAmountError: *value* is not finite, or has more decimal
                places than the currency's exponent.
        """
        if isinstance(value, bool) or not isinstance(value, int | Decimal):
            msg = f"major-unit value must be int or Decimal, not {type(value).__name__}"
            raise TypeError(msg)
        resolved = resolve_currency(currency)
        spec = CURRENCY_SPECS[resolved]
        if isinstance(value, int):
            return cls(minor_units=value * spec.factor, currency=resolved)

        if not value.is_finite():
            raise InexactAmountError(f"{value} is not a finite amount")
        sign, digits, exponent = value.as_tuple()
        coefficient = int("".join(str(d) for d in digits))
        shift = int(exponent) + spec.exponent
        if shift >= 0:
            minor = coefficient * 10**shift
        else:
            minor, remainder = divmod(coefficient, 10**-shift)
            if remainder:
                msg = f"{value} has more than {spec.exponent} decimal places for {resolved.value}"
                raise InexactAmountError(msg)
        return cls(minor_units=-minor if sign else minor, currency=resolved)

    # --- Predicates ---

    @property
    def is_zero(self) -> bool:
        return self.minor_units == 0

    @property
    def is_positive(self) -> bool:
        return self.minor_units > 0

    @property
    def is_negative(self) -> bool:
        return self.minor_units < 0

    # --- Arithmetic ---

    def __add__(self, other: Amount) -> Amount:
        if not isinstance(other, Amount):
            return NotImplemented
        self._require_same_currency(other, "add")
        return self._with(self.minor_units + other.minor_units)

    def __sub__(self, other: Amount) -> Amount:
        if not isinstance(other, Amount):
            return NotImplemented
        self._require_same_currency(other, "subtract")
        return self._with(self.minor_units - other.minor_units)

    def __mul__(self, scalar: int) -> Amount:
        # Fractional scalars would need a rounding policy; refuse them.
        if isinstance(scalar, bool) or not isinstance(scalar, int):
            return NotImplemented
        return self._with(self.minor_units * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Amount:
        return self._with(-self.minor_units)

    def __abs__(self) -> Amount:
        return self._with(abs(self.minor_units))

    # --- Ordering ---

    def compare(self, other: Amount) -> int:
        """Return -1, 0 or 1 as this amount is less than, equal to, or greater than *other*.

        Raises:
            CurrencyMismatchError: the currencies differ.
        """
        if not isinstance(other, Amount):
            raise TypeError(f"cannot compare Amount with {type(other).__name__}")
        self._require_same_currency(other, "compare")
        return (self.minor_units > other.minor_units) - (self.minor_units < other.minor_units)

    def __lt__(self, other: Amount) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Amount) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Amount) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Amount) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.compare(other) >= 0

    # --- Conversion and presentation ---

    def to_decimal(self) -> Decimal:
        """Exact major-unit value, e.g. ``Decimal("10.50")`` for 1050 USD cents."""
        exponent = CURRENCY_SPECS[self.currency].exponent
        digits = tuple(int(d) for d in str(abs(self.minor_units)))
        return Decimal((int(self.minor_units < 0), digits, -exponent))

    def require_fits(self, bits: int = 64) -> Self:
        """Return self if minor units fit a signed *bits*-wide integer.

        Raises:
            AmountOverflowError: the value is out of range.
        """
        if bits < 1:
            raise ValueError("bits must be >= 1")
        bound = 1 << (bits - 1)
        if not -bound <= self.minor_units < bound:
            raise AmountOverflowError(self.minor_units, bits)
        return self

    def format(self, *, symbol: bool = True, grouping: bool = True) -> str:
        """Render for display: ``"$10.50"``, ``"-€1,234.00"``, ``"10.50 CHF"``.

        Args:
            symbol: Prefix the currency symbol when the currency has one.
                Otherwise the ISO code follows the number.
            grouping: Separate thousands with commas.
        """
        spec = CURRENCY_SPECS[self.currency]
        major, minor = divmod(abs(self.minor_units), spec.factor)
        number = f"{major:,}" if grouping else str(major)
        if spec.exponent:
            number = f"{number}.{minor:0{spec.exponent}d}"
        sign = "-" if self.minor_units < 0 else ""
        if symbol and spec.symbol is not None:
            return f"{sign}{spec.symbol}{number}"
        return f"{sign}{number} {self.currency.value}"

    def __str__(self) -> str:
        return self.format()

    # --- Internals ---

    def _with(self, minor_units: int) -> Self:
        return type(self)(minor_units=minor_units, currency=self.currency)

    def _require_same_currency(self, other: Amount, operation: str) -> None:
        if self.currency != other.currency:
            logger.debug(
                "Currency mismatch in %s: %s vs %s",
                operation,
                self.currency.value,
                other.currency.value,
            )
            raise CurrencyMismatchError(self.currency, other.currency, operation)
