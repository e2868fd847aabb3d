from __future__ import annotations

from typing import Any, Optional

from dmsangle.angles import Dms
from dmsangle.core.angle_input import AngleValue, Number, classify, resolve
from dmsangle.core.cache import DmsCache


def angle_filter(value: Any) -> Optional[float]:
    """
    Interpret a decimal number, a DMS string or a Dms as decimal degrees.
    Returns None when the text cannot be read as an angle.
    """
    inp = classify(value)
    if isinstance(inp, Number):
        return inp.value
    if isinstance(inp, AngleValue):
        return inp.value.to_decimal()
    dms = resolve(inp)
    return dms.to_decimal() if dms is not None else None


def dms_filter(value: Any, fraction_digits: Optional[int] = None, cache: Optional[DmsCache] = None) -> str:
    """
    Render a decimal number, a DMS string or a Dms as DMS text.
    Unreadable input renders as "".
    """
    inp = classify(value)
    dms: Optional[Dms]
    if isinstance(inp, Number) and cache is not None:
        dms = cache.get(inp.value)
    else:
        dms = resolve(inp)

    if dms is None:
        return ""
    return dms.format(fraction_digits)
