from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FormatConfig:
    """
    Display settings for DMS text.

    fraction_digits: decimal places for the seconds component (0 -> 12°34'56")
    The three symbols follow each component in that order.
    """
    fraction_digits: int = 0
    degree_symbol: str = "°"
    minute_symbol: str = "'"
    second_symbol: str = '"'


DEFAULT_FORMAT = FormatConfig()
