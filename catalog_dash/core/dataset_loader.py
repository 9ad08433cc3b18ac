from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Tuple

import numpy as np
import pandas as pd

from catalog_dash.core.dataset import Dataset
from catalog_dash.core.exceptions import DatasetLoadError

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"

CATALOG_COLUMNS = [
    "show_id",
    "type",
    "title",
    "director",
    "cast",
    "country",
    "date_added",
    "release_year",
    "rating",
    "duration",
    "listed_in",
    "description",
    "IMDB_numvotes",
    "IMDB_rating",
]

# Alternate year column used when release_year is missing or unparseable
FALLBACK_YEAR_COLUMN = "startYear"

# Grouping keys: always land in an "Unknown" bucket rather than being dropped
_BUCKET_COLUMNS = ("type", "country", "rating", "listed_in")
_TEXT_COLUMNS = ("show_id", "title", "director", "cast", "date_added", "duration", "description")


def _finite_numbers(values: pd.Series) -> pd.Series:
    """
    Parse a column as float, mapping anything non-numeric or non-finite to NaN.
    """
    numbers = pd.to_numeric(values, errors="coerce").astype("float64")
    return numbers.where(np.isfinite(numbers))


def _column(raw: pd.DataFrame, name: str) -> pd.Series:
    if name in raw.columns:
        return raw[name]
    return pd.Series([None] * len(raw), index=raw.index, dtype=object)


def _as_text(value: Any, default: str) -> str:
    if value is None or pd.isna(value):
        return default
    # read_csv infers numbers; a title like "1984" comes back as 1984 or 1984.0
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value)
    return text if text.strip() else default


def _text(values: pd.Series, default: str) -> pd.Series:
    """
    Coerce a column to str; NaN/None and blank strings become `default`.
    """
    return values.map(lambda v: _as_text(v, default)).astype(object)


def normalize_records(raw: pd.DataFrame) -> pd.DataFrame:
    """
    Coerce a raw catalog frame into normalized Records.

    - column names are trimmed; when trimming makes two names equal, the
      last column wins
    - release_year falls back to startYear, then null (nullable Int64,
      rounded to the nearest whole year); a year of 0 counts as missing
    - IMDB_rating / IMDB_numvotes are finite floats or null (nullable Float64)
    - type / country / rating / listed_in default to "Unknown"
    - description and the other text columns default to ""

    No row is ever dropped.
    """
    raw = raw.rename(columns=lambda c: str(c).strip())
    raw = raw.loc[:, ~raw.columns.duplicated(keep="last")]

    out = pd.DataFrame(index=raw.index)

    for name in CATALOG_COLUMNS:
        if name in _BUCKET_COLUMNS:
            out[name] = _text(_column(raw, name), UNKNOWN)
        elif name in _TEXT_COLUMNS:
            out[name] = _text(_column(raw, name), "")

    primary = _finite_numbers(_column(raw, "release_year"))
    fallback = _finite_numbers(_column(raw, FALLBACK_YEAR_COLUMN))
    years = primary.where(primary.notna() & (primary != 0), fallback).round()
    out["release_year"] = years.where(years != 0).astype("Int64")

    out["IMDB_rating"] = _finite_numbers(_column(raw, "IMDB_rating")).astype("Float64")
    out["IMDB_numvotes"] = _finite_numbers(_column(raw, "IMDB_numvotes")).astype("Float64")

    # Keep any extra source columns after the known ones
    extras = [c for c in raw.columns if c not in out.columns and c != FALLBACK_YEAR_COLUMN]
    for name in extras:
        out[name] = raw[name]

    return out[CATALOG_COLUMNS + extras].reset_index(drop=True)


def year_bounds(records: pd.DataFrame) -> Tuple[Optional[int], Optional[int]]:
    """
    Min/max release_year over records with a known year, (None, None) if none.
    """
    years = records["release_year"].dropna()
    if years.empty:
        return None, None
    return int(years.min()), int(years.max())


def read_catalog_csv(path: Path | str) -> pd.DataFrame:
    path = Path(path)
    if not path.is_file():
        raise DatasetLoadError(path, "file not found")

    try:
        return pd.read_csv(path)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError, OSError) as e:
        raise DatasetLoadError(path, str(e)) from e


def load_dataset(path: Path | str, name: Optional[str] = None) -> Dataset:
    """
    Read the catalog CSV, normalize it and compute the year extrema.
    """
    path = Path(path)
    raw = read_catalog_csv(path)
    try:
        records = normalize_records(raw)
    except (ValueError, TypeError, KeyError) as e:
        raise DatasetLoadError(path, f"could not normalize records: {e}") from e
    year_min, year_max = year_bounds(records)

    logger.info(
        "Catalog loaded",
        extra={
            "path": str(path),
            "n_records": len(records),
            "year_min": year_min,
            "year_max": year_max,
        },
    )

    if year_min is None:
        logger.warning(
            "No record in %s has a release year; year filtering is disabled", path
        )

    return Dataset(
        name=name or path.stem,
        records=records,
        year_min=year_min,
        year_max=year_max,
        file_path=path,
    )
