from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, TYPE_CHECKING

import pandas as pd

if TYPE_CHECKING:
    from catalog_dash.core.filter_state import FilterState


class Dataset:
    """
    Unified dataset abstraction used throughout the dashboard.

    Wraps the normalized catalog frame (one row per Record) together with the
    year extrema observed at load time. The frame is never mutated after
    construction; every filter produces a new frame.
    """

    # -------------------------------------------------------------------------
    # Constructor
    # -------------------------------------------------------------------------
    def __init__(
        self,
        name: str,
        records: pd.DataFrame,
        year_min: Optional[int] = None,
        year_max: Optional[int] = None,
        file_path: Optional[Path] = None,
    ) -> None:
        self.name = name
        self._records = records
        self.year_min = year_min
        self.year_max = year_max
        self.file_path = file_path

        self._types: Optional[List[str]] = None

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------
    @property
    def frame(self) -> pd.DataFrame:
        """
        The normalized records. Callers must treat this as read-only.
        """
        return self._records

    @property
    def n_records(self) -> int:
        return len(self._records)

    def __len__(self) -> int:
        return self.n_records

    def types(self) -> List[str]:
        """
        Distinct category labels in first-seen order, cached for the type selector.
        """
        if self._types is None:
            self._types = list(pd.unique(self._records["type"])) if self.n_records else []
        return self._types

    def records(self) -> List[Dict[str, Any]]:
        """
        Records as plain dicts; nullable columns surface as None.
        """
        return [
            {key: (None if pd.isna(value) else value) for key, value in row.items()}
            for row in self._records.to_dict("records")
        ]

    # -------------------------------------------------------------------------
    # Filtering
    # -------------------------------------------------------------------------
    def subset_for_state(self, state: "FilterState") -> pd.DataFrame:
        """
        Return the records that pass every active criterion in the given FilterState.

        All callers should go through this (or filter_records) so if we ever
        need to change the filtering behaviour, we do it in one place.
        """
        from catalog_dash.core.filtering import filter_records

        return filter_records(self._records, state)

    def __repr__(self) -> str:
        return (
            f"Dataset(name={self.name!r}, n_records={self.n_records}, "
            f"years={self.year_min}-{self.year_max})"
        )
