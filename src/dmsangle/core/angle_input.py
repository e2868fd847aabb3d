from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from dmsangle.angles import Dms, is_numeric, parse, to_dms


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class AngleValue:
    value: Dms


AngleInput = Union[Number, Text, AngleValue]


def classify(value: Any) -> AngleInput:
    """
    Decide how an incoming value should be treated:
      Dms instance                 -> AngleValue
      12.5, "12.5", numpy.float64  -> Number
      any other str                -> Text
      None and everything else     -> Text("")
    """
    if isinstance(value, (Number, Text, AngleValue)):
        return value
    if isinstance(value, Dms):
        return AngleValue(value)
    if is_numeric(value):
        return Number(float(value))
    if isinstance(value, str):
        return Text(value)
    return Text("")


def resolve(inp: AngleInput) -> Optional[Dms]:
    """The angle behind any input variant, or None if the text does not parse."""
    if isinstance(inp, AngleValue):
        return inp.value
    if isinstance(inp, Number):
        return to_dms(inp.value)
    if isinstance(inp, Text):
        return parse(inp.value)
    raise TypeError(f"Unknown angle input: {inp!r}")
