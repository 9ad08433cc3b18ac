from __future__ import annotations

from typing import Any, Dict, Optional

import pandas as pd
import plotly.graph_objects as go

from catalog_dash.core.aggregations import genre_distribution
from catalog_dash.core.base_view import BaseView, ClickOutcome
from catalog_dash.core.filter_state import FilterState


class GenreTreemapView(BaseView):
    """
    Treemap of genres, area proportional to the number of titles listed in each.
    """

    id = "genre-treemap"
    label = "Genres"

    def compute_data(self, records: pd.DataFrame) -> pd.DataFrame:
        return genre_distribution(records)

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure()

        fig = go.Figure(
            go.Treemap(
                labels=data["genre"],
                parents=[""] * len(data),
                values=data["count"],
                customdata=data["genre"],
                marker=dict(colors=data["count"], colorscale="Reds"),
                textfont=dict(color="#ffffff", size=11),
                hovertemplate="%{label}: %{value}<extra></extra>",
            )
        )
        fig = self.base_layout(fig)
        fig.update_layout(margin=dict(l=2, r=2, t=2, b=2))
        return fig

    def handle_click(self, point: Dict[str, Any], state: FilterState) -> Optional[ClickOutcome]:
        genre = self.point_key(point, "label")
        if genre is None:
            return None
        return ClickOutcome(state=state.drill_genre(str(genre)))
