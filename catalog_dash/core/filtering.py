from __future__ import annotations

import numpy as np
import pandas as pd

from catalog_dash.core.filter_state import ALL_TYPES, FilterState


def _as_float(values: pd.Series) -> np.ndarray:
    return values.to_numpy(dtype="float64", na_value=np.nan)


def _contains(values: pd.Series, needle: str) -> np.ndarray:
    return values.str.lower().str.contains(needle.lower(), regex=False).to_numpy(dtype=bool)


def filter_records(records: pd.DataFrame, state: FilterState) -> pd.DataFrame:
    """
    Return the records passing every active criterion of `state`.

    All checks are ANDed into one boolean mask, so their order does not matter:

    - type: exact match unless state.type is "All"
    - year bounds: only when the bound is truthy AND the record's year is
      truthy, so records without a year (or year 0) are never excluded here
    - imdb_min: only for records that have a rating
    - genre / country drill-down: case-insensitive substring of the raw
      comma-joined string
    - title drill-down: exact, case-sensitive

    Row order and index are preserved.
    """
    if records.empty:
        return records

    keep = np.ones(len(records), dtype=bool)

    if state.type != ALL_TYPES:
        keep &= (records["type"] == state.type).to_numpy(dtype=bool)

    years = _as_float(records["release_year"])
    year_known = np.nan_to_num(years, nan=0.0) != 0
    ratings = _as_float(records["IMDB_rating"])

    with np.errstate(invalid="ignore"):
        if state.year_min:
            keep &= ~year_known | (years >= state.year_min)
        if state.year_max:
            keep &= ~year_known | (years <= state.year_max)

        keep &= np.isnan(ratings) | (ratings >= state.imdb_min)

    if state.clicked_genre:
        keep &= _contains(records["listed_in"], state.clicked_genre)

    if state.clicked_country:
        keep &= _contains(records["country"], state.clicked_country)

    if state.clicked_title:
        keep &= (records["title"] == state.clicked_title).to_numpy(dtype=bool)

    return records[keep]
