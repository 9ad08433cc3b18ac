from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from catalog_dash.core.aggregations import mean_imdb_by_type
from catalog_dash.core.base_view import ACCENT, BaseView
from catalog_dash.core.tabs import TAB_IMDB


class ImdbByTypeView(BaseView):
    """
    Horizontal bars: mean IMDB rating per type on a fixed 0-10 axis.
    Not clickable.
    """

    id = "imdb-by-type"
    label = "Average IMDB rating by type"
    tab = TAB_IMDB
    height = 220

    def compute_data(self, records: pd.DataFrame) -> pd.DataFrame:
        return mean_imdb_by_type(records)

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure()

        fig = go.Figure(
            go.Bar(
                x=data["mean_rating"],
                y=data["type"],
                orientation="h",
                marker_color=ACCENT,
                hovertemplate="%{y}: %{x:.2f}<extra></extra>",
            )
        )
        fig.update_xaxes(range=[0, 10], nticks=5)
        fig.update_yaxes(autorange="reversed", type="category")
        return self.base_layout(fig)
