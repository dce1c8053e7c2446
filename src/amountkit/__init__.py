"""amountkit: exact, currency-safe monetary amounts."""

from amountkit.domain.amount import Amount
from amountkit.domain.currency import Currency, CurrencySpec, currency_spec, resolve_currency
from amountkit.domain.errors import (
    AmountError,
    AmountOverflowError,
    CurrencyMismatchError,
    InexactAmountError,
    UnknownCurrencyError,
)

__all__ = [
    "Amount",
    "AmountError",
    "AmountOverflowError",
    "Currency",
    "CurrencyMismatchError",
    "CurrencySpec",
    "InexactAmountError",
    "UnknownCurrencyError",
    "currency_spec",
    "resolve_currency",
]
