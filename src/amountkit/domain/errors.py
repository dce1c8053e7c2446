"""Exception hierarchy for amount operations.

All errors derive from :class:`AmountError`. Errors that describe a bad
input value also derive from ``ValueError`` so they surface as
``pydantic.ValidationError`` when raised during model validation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from amountkit.domain.currency import Currency


class AmountError(Exception):
    """Base class for every error raised by amountkit."""


class CurrencyMismatchError(AmountError):
    """Two amounts in different currencies were combined or ordered."""

    def __init__(self, left: Currency, right: Currency, operation: str) -> None:
        self.left = left
        self.right = right
        self.operation = operation
        super().__init__(f"cannot {operation} {left} and {right}: currencies differ")


class UnknownCurrencyError(AmountError, ValueError):
    """No currency matches the given code, name, or symbol."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"unknown currency: {value!r}")


class InexactAmountError(AmountError, ValueError):
    """A major-unit value cannot be represented exactly in minor units."""


class AmountOverflowError(AmountError, OverflowError):
    """Minor units do not fit the requested fixed-width integer."""

    def __init__(self, minor_units: int, bits: int) -> None:
        self.minor_units = minor_units
        self.bits = bits
        super().__init__(f"{minor_units} does not fit a signed {bits}-bit integer")
