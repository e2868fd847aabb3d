from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any, Optional

import structlog

from dmsangle.models import DEFAULT_FORMAT, FormatConfig

log = structlog.get_logger(__name__)

# Anything that is not part of a number separates the d/m/s tokens.
_SEPARATOR_RE = re.compile(r"[^\d.\-]+")


class ValidationError(ValueError):
    """
    Raised when a Dms cannot be built from the given components.

    field: "degrees" | "minutes" | "seconds" | "sign" | "value"
    rule:  "not_numeric" | "negative" | "out_of_range" | "invalid_sign"
    """

    MESSAGES = {
        "not_numeric": "must be numeric",
        "negative": "must be a non-negative number",
        "out_of_range": "must be a number gte 0 and lt 60",
        "invalid_sign": "must be 1 or -1",
    }

    def __init__(self, field: str, rule: str, value: Any = None):
        self.field = field
        self.rule = rule
        self.value = value
        reason = self.MESSAGES.get(rule, rule)
        super().__init__(f"{field.capitalize()} argument to Dms() {reason} (got {value!r}).")


def is_numeric(value: Any) -> bool:
    """True if value is a number, or a string holding one, that is finite."""
    if value is None or isinstance(value, bool):
        return False
    # float() also reads "1_000"; the separator splits d/m/s tokens instead.
    if isinstance(value, str) and "_" in value:
        return False
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return not math.isnan(number) and math.isfinite(number)


def _check_sexagesimal(field: str, value: Any) -> Optional[ValidationError]:
    if not is_numeric(value):
        return ValidationError(field, "not_numeric", value)
    if not 0 <= float(value) < 60:
        return ValidationError(field, "out_of_range", value)
    return None


def check_components(degrees: Any, minutes: Any, seconds: Any, sign: Any) -> Optional[ValidationError]:
    """
    Return the first violated constraint as a ValidationError, or None.

    The error is returned, not raised, so callers that treat bad input as
    routine (parse) can branch on it.
    """
    if not is_numeric(degrees):
        return ValidationError("degrees", "not_numeric", degrees)
    if float(degrees) < 0:
        return ValidationError("degrees", "negative", degrees)

    error = _check_sexagesimal("minutes", minutes) or _check_sexagesimal("seconds", seconds)
    if error is not None:
        return error

    if not is_numeric(sign):
        return ValidationError("sign", "not_numeric", sign)
    if float(sign) not in (1.0, -1.0):
        return ValidationError("sign", "invalid_sign", sign)
    return None


def _format_number(n: float) -> str:
    """45.0 -> '45', 30.5 -> '30.5'."""
    if float(n).is_integer():
        return str(int(n))
    return repr(float(n))


@dataclass(frozen=True)
class Dms:
    """
    Validated Degree-Minute-Second representation of an angle.

    The sign of the angle lives only in `sign`; the three magnitudes are
    never negative:
      Dms(10, 30, 0, -1)  -> -10.5
    """
    degrees: float
    minutes: float
    seconds: float
    sign: int = 1

    def __post_init__(self):
        error = check_components(self.degrees, self.minutes, self.seconds, self.sign)
        if error is not None:
            raise error
        object.__setattr__(self, "degrees", float(self.degrees))
        object.__setattr__(self, "minutes", float(self.minutes))
        object.__setattr__(self, "seconds", float(self.seconds))
        object.__setattr__(self, "sign", int(float(self.sign)))

    @classmethod
    def from_decimal(cls, value: Any) -> "Dms":
        """
        Decompose a signed decimal-degree value:
          35.5     -> 35°30'0"
          -0.0125  -> -0°0'45"
        """
        if not is_numeric(value):
            raise ValidationError("value", "not_numeric", value)

        value = float(value)
        sign = -1 if value < 0 else 1
        magnitude = abs(value)

        degs = math.floor(magnitude)
        mins = math.floor((magnitude - degs) * 60)
        secs = (magnitude - degs - (mins / 60)) * 3600

        # Float repair: the subtraction chain can land just outside [0, 60).
        if secs < 0:
            secs = 0.0
        if secs >= 60:
            secs -= 60
            mins += 1
        if mins >= 60:
            mins -= 60
            degs += 1

        return cls(degs, mins, secs, sign)

    @classmethod
    def parse(cls, text: Any) -> Optional["Dms"]:
        return parse(text)

    def to_decimal(self) -> float:
        return self.sign * (self.degrees + (self.minutes / 60.0) + (self.seconds / 3600.0))

    def format(self, fraction_digits: Optional[int] = None, config: FormatConfig = DEFAULT_FORMAT) -> str:
        """
        Render as <sign><degrees>°<minutes>'<seconds>", with seconds fixed to
        `fraction_digits` places.

        Rounding the seconds may produce 60 at the chosen precision
        (59.9996 at 3 places). The carry is applied to the displayed
        minutes, then degrees; the stored components are left untouched.
        """
        digits = config.fraction_digits if fraction_digits is None else fraction_digits
        if digits < 0:
            raise ValueError(f"fraction_digits must be >= 0, got {digits}")

        # Ties round up: 30.5 at 0 places shows as 31.
        step = Decimal(1).scaleb(-digits)
        secs = Decimal(self.seconds).quantize(step, rounding=ROUND_HALF_UP, context=Context(prec=digits + 3))
        mins = self.minutes
        degs = self.degrees
        if secs >= 60:
            secs = Decimal(0).quantize(step)
            mins += 1
            if mins >= 60:
                mins -= 60
                degs += 1

        return (
            ("-" if self.sign < 0 else "")
            + _format_number(degs) + config.degree_symbol
            + _format_number(mins) + config.minute_symbol
            + f"{secs:.{digits}f}" + config.second_symbol
        )

    def __str__(self) -> str:
        return self.format()


def to_dms(value: Any) -> Dms:
    """Decimal degrees -> Dms. Raises ValidationError for non-numeric input."""
    return Dms.from_decimal(value)


def parse(text: Any) -> Optional[Dms]:
    """
    Build a Dms from loosely formatted text, or return None.

    Accepts any three numbers separated by anything other than digits,
    periods or minus signs:
      "45 30 15"        -> 45°30'15"
      "-10° 0' 0\""     -> -10°0'0"
      "12 34"           -> 12°34'0"
    A single '-' anywhere makes the angle negative. Two or more are
    ambiguous and rejected, as are out-of-range minutes or seconds.
    """
    if not text or not isinstance(text, str):
        return None

    negs = text.count("-")
    if negs > 1:
        log.debug("dms_parse_rejected", text=text, reason="multiple_minus_signs")
        return None

    tokens = [t for t in _SEPARATOR_RE.split(text) if t][:3]
    if not tokens:
        return None

    magnitudes = []
    for token in tokens:
        if not is_numeric(token):
            log.debug("dms_parse_rejected", text=text, reason="bad_token", token=token)
            return None
        magnitudes.append(abs(float(token)))
    magnitudes += [0.0] * (3 - len(magnitudes))

    sign = -1 if negs else 1
    error = check_components(*magnitudes, sign)
    if error is not None:
        log.debug("dms_parse_rejected", text=text, reason=error.rule, field=error.field)
        return None

    return Dms(magnitudes[0], magnitudes[1], magnitudes[2], sign)
