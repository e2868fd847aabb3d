from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional, Union

from dmsangle.angles import is_numeric, parse
from dmsangle.core.cache import DmsCache
from dmsangle.core.filters import dms_filter

# Degree/minute/second glyphs, commas etc. become plain separators.
_NOT_NUMBER_CHAR_RE = re.compile(r"[^\s.\-\d]")


@dataclass(frozen=True)
class FieldState:
    """
    What an angle input field holds after the user typed into it.

    value: decimal degrees, or None when empty or unreadable
    valid: False only when something was typed and it is not an angle
    """
    value: Optional[float]
    valid: bool


def parse_field(text: Optional[str], cache: Optional[DmsCache] = None) -> FieldState:
    """
    Accept either a decimal number or a DMS string:
      "12.5"           -> 12.5
      "12°30'0\""      -> 12.5
      "12 30"          -> 12.5
      "north"          -> invalid

    With a cache, a parsed DMS is remembered under its decimal so the typed
    components are what gets rendered back.
    """
    if not text:
        return FieldState(value=None, valid=True)

    cleaned = _NOT_NUMBER_CHAR_RE.sub(" ", text)
    if is_numeric(cleaned):
        return FieldState(value=float(cleaned), valid=True)

    dms = parse(cleaned)
    if dms is not None:
        value = cache.remember(dms) if cache is not None else dms.to_decimal()
        return FieldState(value=value, valid=True)

    return FieldState(value=None, valid=False)


def format_field(value: Any, fraction_digits: Optional[int] = None) -> Union[float, str]:
    """Numbers stay numbers; anything else is shown as DMS text."""
    if is_numeric(value):
        return float(value)
    return dms_filter(value, fraction_digits)
