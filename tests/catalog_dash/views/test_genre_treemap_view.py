import pandas as pd
import plotly.graph_objs as go

from catalog_dash.core.dataset_loader import normalize_records
from catalog_dash.core.filter_state import FilterState
from catalog_dash.views.genre_treemap_view import GenreTreemapView


def test_genre_treemap_one_leaf_per_genre():
    records = normalize_records(
        pd.DataFrame({"title": list("ab"), "listed_in": ["Dramas, Comedies", "Dramas"]})
    )
    view = GenreTreemapView()

    fig = view.render_figure(view.compute_data(records))

    assert isinstance(fig.data[0], go.Treemap)
    leaves = dict(zip(fig.data[0].labels, fig.data[0].values))
    assert leaves == {"Dramas": 2, "Comedies": 1}


def test_genre_treemap_empty():
    view = GenreTreemapView()
    fig = view.render_figure(pd.DataFrame(columns=["genre", "count"]))
    assert fig.layout.title.text == "No data"


def test_genre_treemap_click_sets_genre():
    outcome = GenreTreemapView().handle_click({"label": "Comedies"}, FilterState())

    assert outcome.open_imdb
    assert outcome.state.clicked_genre == "Comedies"
