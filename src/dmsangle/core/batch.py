import numpy as np
from typing import Tuple

from dmsangle.angles import ValidationError


def decompose(values) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Vectorised Dms.from_decimal.

    Returns (sign, degrees, minutes, seconds) arrays with the same shape as
    `values`. sign is an int array of +1/-1, the magnitudes are floats.
    """
    v = np.asarray(values, dtype=float)
    if not np.all(np.isfinite(v)):
        bad = v[~np.isfinite(v)]
        raise ValidationError("value", "not_numeric", bad.tolist())

    sign = np.where(v < 0, -1, 1)
    magnitude = np.abs(v)

    degs = np.floor(magnitude)
    mins = np.floor((magnitude - degs) * 60)
    secs = (magnitude - degs - mins / 60) * 3600

    # Same float repair as the scalar path
    secs = np.where(secs < 0, 0.0, secs)
    carry = secs >= 60
    secs = np.where(carry, secs - 60, secs)
    mins = np.where(carry, mins + 1, mins)
    carry = mins >= 60
    mins = np.where(carry, mins - 60, mins)
    degs = np.where(carry, degs + 1, degs)

    return sign, degs, mins, secs


def recompose(sign, degrees, minutes, seconds) -> np.ndarray:
    """sign * (d + m/60 + s/3600), elementwise."""
    sign = np.asarray(sign, dtype=float)
    degrees = np.asarray(degrees, dtype=float)
    minutes = np.asarray(minutes, dtype=float)
    seconds = np.asarray(seconds, dtype=float)
    return sign * (degrees + minutes / 60.0 + seconds / 3600.0)
