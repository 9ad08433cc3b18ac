from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

import pandas as pd

from .aggregations import KpiSummary, kpi_summary, table_rows, top_rated_rows
from .base_view import BaseView
from .dataset import Dataset
from .filter_state import FilterState

logger = logging.getLogger(__name__)


@dataclass
class DashboardSnapshot:
    """
    Everything one render needs, computed from a single FilterState.

    - records: the filtered subset
    - kpis: KPI summary of the subset
    - view_data: compute_data() output per view id
    - table: display rows of the top-rated table
    """
    state: FilterState
    records: pd.DataFrame
    kpis: KpiSummary
    view_data: Dict[str, Any] = field(default_factory=dict)
    table: List[Dict[str, str]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.records.empty


def recompute(
        dataset: Dataset,
        state: FilterState,
        views: Sequence[BaseView],
        table_row_cap: int = 200,
) -> DashboardSnapshot:
    """
    Apply `state` and recompute every view: filter once, then run every
    aggregator on the same subset. Nothing here draws.
    """
    records = dataset.subset_for_state(state)

    logger.info(
        "recompute",
        extra={
            "dataset": dataset.name,
            "n_records": len(records),
            "type": state.type,
            "year_min": state.year_min,
            "year_max": state.year_max,
            "imdb_min": state.imdb_min,
            "drilldowns": dict(state.active_drilldowns()),
        },
    )

    view_data = {view.id: view.timed_compute(records) for view in views}

    return DashboardSnapshot(
        state=state,
        records=records,
        kpis=kpi_summary(records),
        view_data=view_data,
        table=table_rows(top_rated_rows(records, limit=table_row_cap)),
    )
