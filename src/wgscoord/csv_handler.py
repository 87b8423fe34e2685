from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import pandas as pd

from wgscoord.core.parser import parse_coordinate
from wgscoord.errors import CoordinateError

logger = logging.getLogger(__name__)


def parse_csv_column(path: str | Path, column: str) -> pd.DataFrame:
    """
    Reads a CSV and parses one text column into Lon, Lat, h columns.

    Rows that do not parse get NaN coordinates and the reason in ``error``.
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    if column not in df.columns:
        raise ValueError(f"CSV has no column {column!r} (got {list(df.columns)})")

    lon, lat, h, errors = [], [], [], []
    for text in df[column]:
        try:
            coord = parse_coordinate(text)
        except CoordinateError as e:
            logger.warning("Row %r skipped: %s", text, e)
            lon.append(np.nan)
            lat.append(np.nan)
            h.append(np.nan)
            errors.append(str(e))
            continue
        lon.append(coord.longitude)
        lat.append(coord.latitude)
        h.append(np.nan if coord.elevation is None else coord.elevation)
        errors.append("")

    df["Lon"] = np.array(lon, dtype=float)
    df["Lat"] = np.array(lat, dtype=float)
    df["h"] = np.array(h, dtype=float)
    df["error"] = errors
    return df


def save_results_csv(path: str | Path, df: pd.DataFrame) -> None:
    """Saves a Pandas DataFrame to CSV."""
    df.to_csv(path, index=False)
