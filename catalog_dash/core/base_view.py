from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

import pandas as pd
import plotly.graph_objs as go

from .filter_state import FilterState
from .tabs import TAB_SUMMARY

logger = logging.getLogger(__name__)

NO_DATA = "No data"

ACCENT = "#e31b23"


@dataclass(frozen=True)
class ClickOutcome:
    """
    Result of clicking a chart element: the next FilterState and whether the
    dashboard should switch to the IMDB tab.
    """
    state: FilterState
    open_imdb: bool = True


class BaseView(ABC):
    """
    Abstract base class for all chart views.

    Defines the contract that every view in the dashboard must follow
    - expose an 'id' - used internally and as the dcc.Graph id
    - expose a 'label' - used for card headers
    - expose a 'tab' - which view group the chart lives in
    - implement 'compute_data' - aggregate the already filtered records
    - implement 'render_figure' - turn that aggregate into a Plotly figure
    - optionally implement 'handle_click' - map a clicked point to a new FilterState
    """

    id: str = None
    label: str = None
    tab: str = TAB_SUMMARY
    height: int = 260

    def __init__(self, **options: Any):
        self.options = options

    @abstractmethod
    def compute_data(self, records: pd.DataFrame) -> Any:
        """
        Compute this view's data from the filtered records
        :param records: the records left after applying the current FilterState
        :return: data: usually a small aggregate DataFrame
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link compute_data()}
        :return: the Plotly figure
        """
        raise NotImplementedError()

    def handle_click(self, point: Dict[str, Any], state: FilterState) -> Optional[ClickOutcome]:
        """
        Map one clicked Plotly point to the next FilterState.
        Views without click behaviour return None.
        """
        return None

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def timed_compute(self, records: pd.DataFrame) -> Any:
        start = time.perf_counter()
        data = self.compute_data(records)
        logger.debug(
            "view_compute",
            extra={
                "view_id": self.id,
                "n_records": len(records),
                "elapsed_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )
        return data

    @staticmethod
    def point_key(point: Dict[str, Any], *fallbacks: str) -> Any:
        """
        Key of a clicked point: its customdata when present, otherwise the
        first of `fallbacks` found in the point dict.
        """
        if not isinstance(point, dict):
            return None

        custom = point.get("customdata")
        if isinstance(custom, (list, tuple)):
            custom = custom[0] if custom else None
        if custom is not None:
            return custom

        for key in fallbacks:
            if point.get(key) is not None:
                return point[key]
        return None

    def base_layout(self, fig: go.Figure) -> go.Figure:
        fig.update_layout(
            height=self.height,
            margin=dict(l=10, r=10, t=10, b=30),
            showlegend=False,
            clickmode="event",
        )
        return fig

    @staticmethod
    def empty_figure(message: str = NO_DATA) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.add_annotation(
            text=message,
            showarrow=False,
            xref="paper",
            yref="paper",
            x=0.0,
            y=1.0,
            xanchor="left",
            yanchor="top",
        )
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
            margin=dict(l=10, r=10, t=40, b=10),
        )
        return fig
