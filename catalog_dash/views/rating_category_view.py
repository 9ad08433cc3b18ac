from __future__ import annotations

from typing import Any, Dict, Optional

import pandas as pd
import plotly.graph_objects as go

from catalog_dash.core.aggregations import rating_histogram
from catalog_dash.core.base_view import ACCENT, BaseView, ClickOutcome
from catalog_dash.core.filter_state import FilterState


class RatingCategoryView(BaseView):
    """
    Horizontal bars: titles per content rating (TV-MA, PG-13, ...).

    A click does not filter by rating; it clears every drill-down and opens
    the IMDB tab.
    """

    id = "rating-category"
    label = "Content ratings"

    def compute_data(self, records: pd.DataFrame) -> pd.DataFrame:
        return rating_histogram(records)

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure()

        fig = go.Figure(
            go.Bar(
                x=data["count"],
                y=data["rating"],
                customdata=data["rating"],
                orientation="h",
                marker_color=ACCENT,
                hovertemplate="%{y}: %{x}<extra></extra>",
            )
        )
        # Largest bucket on top
        fig.update_yaxes(autorange="reversed", type="category")
        fig.update_xaxes(rangemode="tozero", nticks=4)
        return self.base_layout(fig)

    def handle_click(self, point: Dict[str, Any], state: FilterState) -> Optional[ClickOutcome]:
        return ClickOutcome(state=state.clear_drilldowns())
