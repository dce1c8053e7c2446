"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, amountkit.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class FormatConfig(BaseModel):
    """[format] section: how amounts are rendered for display."""

    model_config = {"frozen": True}

    use_symbol: bool = True
    grouping: bool = True
