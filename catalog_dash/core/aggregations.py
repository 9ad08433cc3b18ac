from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List

import numpy as np
import pandas as pd

UNKNOWN = "Unknown"

WORD_PATTERN = re.compile(r"\b[a-z]{3,}\b")

TABLE_COLUMNS = ["Title", "Type", "Year", "IMDB", "Votes", "Genres"]


@dataclass(frozen=True)
class KpiSummary:
    mean_rating: float
    total_votes: float
    count: int


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def _numbers(values: pd.Series) -> np.ndarray:
    return values.to_numpy(dtype="float64", na_value=np.nan)


def _count_buckets(keys: pd.Series, key_name: str) -> pd.DataFrame:
    """
    Count occurrences per key, descending by count. Ties keep first-seen order.
    """
    counts = keys.groupby(keys, sort=False).size()
    counts = counts.sort_values(ascending=False, kind="stable")
    return pd.DataFrame({key_name: counts.index.astype(object), "count": counts.to_numpy(dtype=int)})


def _split_tokens(values: pd.Series) -> pd.Series:
    """
    Split comma-joined strings into trimmed tokens, one row per (record, token).
    Empty tokens are dropped.
    """
    tokens = values.fillna(UNKNOWN).astype(str).str.split(",").explode().str.strip()
    return tokens[tokens != ""]


# -----------------------------------------------------------------------------
# Aggregators
# -----------------------------------------------------------------------------
def kpi_summary(records: pd.DataFrame) -> KpiSummary:
    """
    Mean IMDB rating, total votes and record count; the numeric parts are 0
    when there is nothing to average or sum.
    """
    ratings = _numbers(records["IMDB_rating"]) if len(records) else np.array([])
    votes = _numbers(records["IMDB_numvotes"]) if len(records) else np.array([])

    rated = ratings[~np.isnan(ratings)]
    mean_rating = float(rated.mean()) if rated.size else 0.0
    total_votes = float(np.nansum(votes)) if votes.size else 0.0

    return KpiSummary(mean_rating=mean_rating, total_votes=total_votes, count=len(records))


def year_histogram(records: pd.DataFrame) -> pd.DataFrame:
    years = records["release_year"].dropna()
    if years.empty:
        return pd.DataFrame({"release_year": pd.Series(dtype=int), "count": pd.Series(dtype=int)})

    counts = years.astype(int).value_counts().sort_index()
    return pd.DataFrame(
        {"release_year": counts.index.to_numpy(dtype=int), "count": counts.to_numpy(dtype=int)}
    )


def rating_histogram(records: pd.DataFrame) -> pd.DataFrame:
    ratings = records["rating"].fillna(UNKNOWN).replace("", UNKNOWN)
    return _count_buckets(ratings, "rating")


def country_histogram(records: pd.DataFrame, top_n: int = 8) -> pd.DataFrame:
    """
    A record listing three countries adds one to each of the three buckets.
    """
    tokens = _split_tokens(records["country"])
    return _count_buckets(tokens, "country").head(top_n).reset_index(drop=True)


def genre_distribution(records: pd.DataFrame) -> pd.DataFrame:
    tokens = _split_tokens(records["listed_in"])
    return _count_buckets(tokens, "genre")


def mean_imdb_by_type(records: pd.DataFrame) -> pd.DataFrame:
    """
    Mean IMDB rating per type; null ratings are skipped and a group with no
    rating at all scores 0.
    """
    if records.empty:
        return pd.DataFrame({"type": pd.Series(dtype=object), "mean_rating": pd.Series(dtype=float)})

    frame = pd.DataFrame(
        {"type": records["type"].to_numpy(), "rating": _numbers(records["IMDB_rating"])}
    )
    means = frame.groupby("type", sort=False)["rating"].mean().fillna(0.0)
    means = means.sort_values(ascending=False, kind="stable")
    return pd.DataFrame({"type": means.index.astype(object), "mean_rating": means.to_numpy(dtype=float)})


def word_frequency(records: pd.DataFrame, top_n: int = 20) -> pd.DataFrame:
    """
    Most common words of 3+ letters across all descriptions.
    """
    text = " ".join(records["description"].fillna("").astype(str)).lower()
    counts = Counter(WORD_PATTERN.findall(text))
    top = counts.most_common(top_n)
    return pd.DataFrame(
        {"word": [w for w, _ in top], "count": [c for _, c in top]},
        columns=["word", "count"],
    )


def top_rated_rows(records: pd.DataFrame, limit: int = 200) -> pd.DataFrame:
    rated = records[records["IMDB_rating"].notna()]
    return rated.sort_values("IMDB_rating", ascending=False, kind="stable").head(limit)


# -----------------------------------------------------------------------------
# Display formatting
# -----------------------------------------------------------------------------
def format_kpis(summary: KpiSummary) -> Dict[str, str]:
    return {
        "imdb": f"{summary.mean_rating:.2f}",
        "votes": f"{round(summary.total_votes):,}",
        "count": str(summary.count),
    }


def _cell(value, fmt: str = "{}") -> str:
    if value is None or pd.isna(value):
        return ""
    return fmt.format(value)


def _votes_cell(value) -> str:
    # zero votes renders blank, same as a missing count
    if value is None or pd.isna(value) or not value:
        return ""
    return f"{round(value):,}"


def table_rows(rows: pd.DataFrame) -> List[Dict[str, str]]:
    """
    Rows for the top-rated DataTable: Title, Type, Year, IMDB, Votes, Genres.
    """
    out: List[Dict[str, str]] = []
    for row in rows.to_dict("records"):
        out.append(
            {
                "Title": _cell(row.get("title")),
                "Type": _cell(row.get("type")),
                "Year": _cell(row.get("release_year")),
                "IMDB": _cell(row.get("IMDB_rating"), "{:.1f}"),
                "Votes": _votes_cell(row.get("IMDB_numvotes")),
                "Genres": _cell(row.get("listed_in")),
            }
        )
    return out
