from __future__ import annotations

from typing import Any, Dict, Optional

import pandas as pd
import plotly.graph_objects as go

from catalog_dash.core.aggregations import year_histogram
from catalog_dash.core.base_view import ACCENT, BaseView, ClickOutcome
from catalog_dash.core.filter_state import FilterState


class TitlesPerYearView(BaseView):
    """
    Line + markers: number of titles per release year.
    Clicking a point pins both year bounds to that year.
    """

    id = "titles-per-year"
    label = "Titles per release year"

    def compute_data(self, records: pd.DataFrame) -> pd.DataFrame:
        return year_histogram(records)

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure()

        fig = go.Figure(
            go.Scatter(
                x=data["release_year"],
                y=data["count"],
                customdata=data["release_year"],
                mode="lines+markers",
                line=dict(color=ACCENT, width=2),
                marker=dict(size=6, color="#ffdede", line=dict(color=ACCENT, width=1)),
                hovertemplate="Year %{x}<br>%{y} titles<extra></extra>",
            )
        )
        fig.update_xaxes(tickformat="d", nticks=6)
        fig.update_yaxes(rangemode="tozero", nticks=4)
        return self.base_layout(fig)

    def handle_click(self, point: Dict[str, Any], state: FilterState) -> Optional[ClickOutcome]:
        year = self.point_key(point, "x")
        if year is None:
            return None
        return ClickOutcome(state=state.pin_year(year))
