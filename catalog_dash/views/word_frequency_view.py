from __future__ import annotations

from typing import Any, Dict, Optional

import pandas as pd
import plotly.graph_objects as go

from catalog_dash.core.aggregations import word_frequency
from catalog_dash.core.base_view import BaseView, ClickOutcome
from catalog_dash.core.filter_state import FilterState
from catalog_dash.core.tabs import TAB_IMDB


class WordFrequencyView(BaseView):
    """
    Horizontal bars of the most common description words, shaded by count.

    Clicking a word uses it as the genre drill-down, so the subset narrows to
    titles whose genre list contains that word.
    """

    id = "word-frequency"
    label = "Top description words"
    tab = TAB_IMDB
    height = 300

    def __init__(self, top_n: int = 20, **options: Any):
        super().__init__(**options)
        self.top_n = top_n

    def compute_data(self, records: pd.DataFrame) -> pd.DataFrame:
        return word_frequency(records, top_n=self.top_n)

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure()

        fig = go.Figure(
            go.Bar(
                x=data["count"],
                y=data["word"],
                customdata=data["word"],
                orientation="h",
                text=data["count"],
                textposition="outside",
                marker=dict(
                    color=data["count"],
                    colorscale="Reds",
                    cmin=0,
                    cmax=int(data["count"].max()),
                ),
                hovertemplate="%{y}: %{x}<extra></extra>",
            )
        )
        fig.update_yaxes(autorange="reversed", type="category")
        fig.update_xaxes(rangemode="tozero", nticks=5)
        fig = self.base_layout(fig)
        fig.update_layout(margin=dict(l=10, r=20, t=20, b=40))
        return fig

    def handle_click(self, point: Dict[str, Any], state: FilterState) -> Optional[ClickOutcome]:
        word = self.point_key(point, "y", "label")
        if word is None:
            return None
        return ClickOutcome(state=state.drill_genre(str(word)))
