"""Settings-driven display helpers.

``Amount.format`` is pure and takes its options explicitly. This module
binds those options to the ``[format]`` config section so host
applications render every amount the same way.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from pydantic import BaseModel

from amountkit.config.logging import get_logger

if TYPE_CHECKING:
    from amountkit.config.models import FormatConfig
    from amountkit.config.settings import AmountkitSettings
    from amountkit.domain.amount import Amount

logger = get_logger(__name__)


class AmountFormatter(BaseModel):
    """Frozen rendering options applied to every amount."""

    model_config = {"frozen": True}

    use_symbol: bool = True
    grouping: bool = True

    @classmethod
    def from_config(cls, config: FormatConfig) -> AmountFormatter:
        return cls(use_symbol=config.use_symbol, grouping=config.grouping)

    @classmethod
    def from_settings(cls, settings: AmountkitSettings) -> AmountFormatter:
        return cls.from_config(settings.format)

    def format(self, amount: Amount) -> str:
        return amount.format(symbol=self.use_symbol, grouping=self.grouping)

    def format_many(self, amounts: Iterable[Amount]) -> str:
        """Render one amount per line."""
        lines = [self.format(amount) for amount in amounts]
        logger.debug("formatted amounts", count=len(lines))
        return "\n".join(lines)


def format_amount(amount: Amount, *, settings: AmountkitSettings | None = None) -> str:
    """Format *amount* with *settings*, or with the defaults when None."""
    if settings is None:
        return AmountFormatter().format(amount)
    return AmountFormatter.from_settings(settings).format(amount)
