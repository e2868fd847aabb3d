from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd

from dmsangle.angles import Dms, is_numeric
from dmsangle.core.batch import decompose
from dmsangle.core.filters import angle_filter, dms_filter


def read_angles_csv(path: str | Path) -> pd.DataFrame:
    """Reads a CSV keeping every column as text, so DMS strings survive untouched."""
    return pd.read_csv(path, dtype=str, keep_default_na=False)


def convert_column(df: pd.DataFrame, column: str, to: str = "dms", fraction_digits: int = 0) -> pd.DataFrame:
    """
    Returns a copy of `df` with one extra column:
      to="dms"     -> "<column>_dms"      text like -12°30'0", "" where the cell is not an angle
      to="decimal" -> "<column>_decimal"  float, NaN where the cell is not an angle
    """
    if column not in df.columns:
        raise ValueError(f"Column {column!r} not found. Available: {list(df.columns)}")

    out = df.copy()
    if to == "decimal":
        decimals = [angle_filter(cell) for cell in df[column]]
        out[f"{column}_decimal"] = [np.nan if v is None else v for v in decimals]
    elif to == "dms":
        cells = list(df[column])
        # Numeric cells are decomposed in one vectorised pass; DMS text and
        # blanks go through the filter ("" when unreadable).
        numeric = [i for i, cell in enumerate(cells) if is_numeric(cell)]
        rendered = [
            "" if is_numeric(cell) else dms_filter(cell, fraction_digits)
            for cell in cells
        ]
        if numeric:
            sign, degs, mins, secs = decompose([float(cells[i]) for i in numeric])
            for i, sg, d, m, s in zip(numeric, sign.tolist(), degs.tolist(), mins.tolist(), secs.tolist()):
                rendered[i] = Dms(d, m, s, sg).format(fraction_digits)
        out[f"{column}_dms"] = rendered
    else:
        raise ValueError(f"Unknown conversion target: {to}")
    return out


def save_results_csv(path: str | Path, df: pd.DataFrame) -> None:
    """Saves a Pandas DataFrame to CSV."""
    df.to_csv(path, index=False)
