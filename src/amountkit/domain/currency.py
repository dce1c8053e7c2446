"""Currencies and their minor-unit metadata.

Exponents follow ISO 4217: the number of digits after the decimal point
in the major unit (USD 2, JPY 0, KWD 3). An amount's minor units are
``major * 10 ** exponent``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from amountkit.domain.errors import UnknownCurrencyError


class Currency(StrEnum):
    """ISO 4217 currency codes known to amountkit."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    CHF = "CHF"
    CAD = "CAD"
    AUD = "AUD"
    KWD = "KWD"


@dataclass(frozen=True)
class CurrencySpec:
    """Presentation and scaling metadata for one currency."""

    code: Currency
    name: str
    exponent: int
    symbol: str | None = None

    @property
    def factor(self) -> int:
        """Minor units per major unit."""
        return 10**self.exponent


CURRENCY_SPECS: dict[Currency, CurrencySpec] = {
    Currency.USD: CurrencySpec(Currency.USD, "US Dollar", 2, "$"),
    Currency.EUR: CurrencySpec(Currency.EUR, "Euro", 2, "€"),
    Currency.GBP: CurrencySpec(Currency.GBP, "Pound Sterling", 2, "£"),
    Currency.JPY: CurrencySpec(Currency.JPY, "Yen", 0, "¥"),
    Currency.CHF: CurrencySpec(Currency.CHF, "Swiss Franc", 2),
    Currency.CAD: CurrencySpec(Currency.CAD, "Canadian Dollar", 2, "CA$"),
    Currency.AUD: CurrencySpec(Currency.AUD, "Australian Dollar", 2, "A$"),
    Currency.KWD: CurrencySpec(Currency.KWD, "Kuwaiti Dinar", 3),
}

# Lowercased aliases. "$" and "dollar" mean USD, not CAD/AUD.
CURRENCY_ALIASES: dict[str, Currency] = {
    "dollar": Currency.USD,
    "euro": Currency.EUR,
    "pound": Currency.GBP,
    "yen": Currency.JPY,
    "franc": Currency.CHF,
    "dinar": Currency.KWD,
    **{
        spec.symbol.lower(): spec.code
        for spec in CURRENCY_SPECS.values()
        if spec.symbol is not None
    },
}


def resolve_currency(value: Currency | str) -> Currency:
    """Resolve a code, English name, or symbol to a :class:`Currency`.

    Matching is case-insensitive and ignores surrounding whitespace.

    Examples:
        >>> resolve_currency("usd")
        <Currency.USD: 'USD'>
        >>> resolve_currency("€")
        <Currency.EUR: 'EUR'>

    Raises:
        UnknownCurrencyError: if nothing matches.
    """
    if isinstance(value, Currency):
        return value
    key = value.strip()
    try:
        return Currency(key.upper())
    except ValueError:
        pass
    try:
        return CURRENCY_ALIASES[key.lower()]
    except KeyError:
        raise UnknownCurrencyError(value) from None


def currency_spec(currency: Currency | str) -> CurrencySpec:
    """Return the :class:`CurrencySpec` for *currency*."""
    return CURRENCY_SPECS[resolve_currency(currency)]
