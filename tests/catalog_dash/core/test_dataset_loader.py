import io
import math

import numpy as np
import pandas as pd
import pytest

from catalog_dash.core import dataset_loader
from catalog_dash.core.dataset_loader import (
    CATALOG_COLUMNS,
    load_dataset,
    normalize_records,
    year_bounds,
)
from catalog_dash.core.exceptions import DatasetLoadError


def _raw_frame():
    """
    Four raw rows exercising every normalisation rule:
    - padded header names
    - a missing release_year that falls back to startYear
    - non-numeric / infinite IMDB values
    - missing country, genre list, rating and description
    """
    return pd.DataFrame(
        {
            " title ": ["A", "B", "C", "D"],
            "type": ["Movie", "TV Show", None, "Movie"],
            "country": ["India, United States", None, "", "France"],
            "listed_in": ["Dramas", None, "Comedies", "  "],
            "rating": ["TV-MA", None, "PG", "R"],
            "description": ["A great story", None, "Another one", "x"],
            "release_year": [2001, None, "abc", 1999.0],
            "startYear": [None, 2010, None, None],
            "IMDB_rating ": [7.5, "not available", np.inf, None],
            "IMDB_numvotes": [100, 200, "n/a", -np.inf],
        }
    )


def test_normalize_trims_column_names_and_keeps_every_row():
    out = normalize_records(_raw_frame())

    assert len(out) == 4
    assert list(out.columns[: len(CATALOG_COLUMNS)]) == CATALOG_COLUMNS
    assert list(out["title"]) == ["A", "B", "C", "D"]
    assert "startYear" not in out.columns


def test_normalize_release_year_falls_back_then_null():
    out = normalize_records(_raw_frame())
    years = list(out["release_year"])

    assert years[0] == 2001
    assert years[1] == 2010  # from startYear
    assert years[2] is pd.NA  # "abc" and no fallback
    assert years[3] == 1999


def test_normalize_numeric_fields_are_finite_or_null():
    out = normalize_records(_raw_frame())

    for column in ("IMDB_rating", "IMDB_numvotes"):
        for value in out[column]:
            assert value is pd.NA or math.isfinite(value)

    assert out["IMDB_rating"].iloc[0] == 7.5
    assert out["IMDB_rating"].iloc[1:].isna().all()
    assert list(out["IMDB_numvotes"].notna()) == [True, True, False, False]


def test_normalize_grouping_fields_default_to_unknown():
    out = normalize_records(_raw_frame())

    assert list(out["country"]) == ["India, United States", "Unknown", "Unknown", "France"]
    assert list(out["listed_in"]) == ["Dramas", "Unknown", "Comedies", "Unknown"]
    assert list(out["rating"]) == ["TV-MA", "Unknown", "PG", "R"]
    assert list(out["type"]) == ["Movie", "TV Show", "Unknown", "Movie"]
    assert list(out["description"]) == ["A great story", "", "Another one", "x"]


def test_normalize_creates_missing_columns():
    out = normalize_records(pd.DataFrame({"title": ["Only title"]}))

    assert set(CATALOG_COLUMNS).issubset(out.columns)
    assert out["country"].iloc[0] == "Unknown"
    assert out["description"].iloc[0] == ""
    assert out["release_year"].isna().all()
    assert out["IMDB_rating"].isna().all()


def test_year_bounds_ignores_null_years():
    out = normalize_records(_raw_frame())
    assert year_bounds(out) == (1999, 2010)


def test_year_bounds_without_any_year():
    out = normalize_records(pd.DataFrame({"title": ["x", "y"]}))
    assert year_bounds(out) == (None, None)


def test_load_dataset_reads_csv(tmp_path):
    csv_path = tmp_path / "catalog.csv"
    csv_path.write_text(
        "show_id, type ,title,country,release_year,rating,listed_in,description,IMDB_numvotes,IMDB_rating\n"
        's1,Movie,Alpha,"India, United States",2005,PG,Dramas,Great film,1000,8.1\n'
        "s2,TV Show,Beta,,2012,,Comedies,,n/a,oops\n"
    )

    ds = load_dataset(csv_path)

    assert ds.name == "catalog"
    assert ds.n_records == 2
    assert (ds.year_min, ds.year_max) == (2005, 2012)
    assert ds.file_path == csv_path
    assert ds.types() == ["Movie", "TV Show"]

    records = ds.records()
    assert records[1]["country"] == "Unknown"
    assert records[1]["rating"] == "Unknown"
    assert records[1]["IMDB_rating"] is None
    assert records[1]["IMDB_numvotes"] is None
    assert records[0]["IMDB_rating"] == pytest.approx(8.1)


def test_load_dataset_missing_file_raises(tmp_path):
    with pytest.raises(DatasetLoadError) as excinfo:
        load_dataset(tmp_path / "nope.csv")

    assert "file not found" in str(excinfo.value)
    assert excinfo.value.path == tmp_path / "nope.csv"


def test_load_dataset_empty_file_raises(tmp_path):
    csv_path = tmp_path / "empty.csv"
    csv_path.write_text("")

    with pytest.raises(DatasetLoadError):
        load_dataset(csv_path)


def test_normalize_trimmed_duplicate_headers_keep_last_column():
    raw = pd.read_csv(io.StringIO("title, title,release_year\nA,B,2001\n"))

    out = normalize_records(raw)

    assert list(out.columns).count("title") == 1
    assert list(out["title"]) == ["B"]
    assert list(out["release_year"]) == [2001]


def test_normalize_rounds_fractional_years():
    out = normalize_records(pd.DataFrame({"title": ["a", "b"], "release_year": [2001.6, 1999.2]}))

    assert list(out["release_year"]) == [2002, 1999]


def test_normalize_year_zero_counts_as_missing():
    out = normalize_records(
        pd.DataFrame(
            {
                "title": ["a", "b", "c"],
                "release_year": [0, 0, 2003],
                "startYear": [1999, None, None],
            }
        )
    )
    years = list(out["release_year"])

    assert years[0] == 1999  # falls back to startYear
    assert years[1] is pd.NA
    assert year_bounds(out) == (1999, 2003)


def test_load_dataset_wraps_normalisation_failures(tmp_path, monkeypatch):
    csv_path = tmp_path / "catalog.csv"
    csv_path.write_text("title,release_year\nA,2001\n")

    def _broken(raw):
        raise ValueError("cannot coerce")

    monkeypatch.setattr(dataset_loader, "normalize_records", _broken)

    with pytest.raises(DatasetLoadError) as excinfo:
        load_dataset(csv_path)

    assert excinfo.value.path == csv_path
    assert "cannot coerce" in str(excinfo.value)
