from __future__ import annotations

from typing import Any, Dict, Optional

import pandas as pd
import plotly.graph_objects as go

from catalog_dash.core.aggregations import country_histogram
from catalog_dash.core.base_view import ACCENT, BaseView, ClickOutcome
from catalog_dash.core.filter_state import FilterState


class TopCountriesView(BaseView):
    """
    Horizontal bars: the most frequent production countries.
    """

    id = "top-countries"
    label = "Top countries"

    def __init__(self, top_n: int = 8, **options: Any):
        super().__init__(**options)
        self.top_n = top_n

    def compute_data(self, records: pd.DataFrame) -> pd.DataFrame:
        return country_histogram(records, top_n=self.top_n)

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure()

        fig = go.Figure(
            go.Bar(
                x=data["count"],
                y=data["country"],
                customdata=data["country"],
                orientation="h",
                marker_color=ACCENT,
                hovertemplate="%{y}: %{x}<extra></extra>",
            )
        )
        fig.update_yaxes(autorange="reversed", type="category")
        fig.update_xaxes(rangemode="tozero", nticks=4)
        return self.base_layout(fig)

    def handle_click(self, point: Dict[str, Any], state: FilterState) -> Optional[ClickOutcome]:
        country = self.point_key(point, "y", "label")
        if country is None:
            return None
        return ClickOutcome(state=state.drill_country(str(country)))
