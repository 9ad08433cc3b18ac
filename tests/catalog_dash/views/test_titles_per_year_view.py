import pandas as pd
import plotly.graph_objs as go

from catalog_dash.core.dataset_loader import normalize_records
from catalog_dash.core.filter_state import FilterState
from catalog_dash.views.titles_per_year_view import TitlesPerYearView


def _make_records():
    return normalize_records(
        pd.DataFrame({"title": list("abcd"), "release_year": [2001, 2003, 2001, None]})
    )


def test_titles_per_year_compute_and_render():
    view = TitlesPerYearView()

    data = view.compute_data(_make_records())
    fig = view.render_figure(data)

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 1
    trace = fig.data[0]
    assert list(trace.x) == [2001, 2003]
    assert list(trace.y) == [2, 1]
    assert trace.mode == "lines+markers"


def test_titles_per_year_empty_renders_placeholder():
    view = TitlesPerYearView()
    data = view.compute_data(_make_records().iloc[0:0])

    fig = view.render_figure(data)

    assert fig.layout.title.text == "No data"
    assert len(fig.data) == 0


def test_titles_per_year_click_pins_year_and_opens_imdb():
    view = TitlesPerYearView()
    state = FilterState(year_min=1990, year_max=2020, clicked_genre="Dramas")

    outcome = view.handle_click({"x": 2003, "y": 1, "customdata": 2003}, state)

    assert outcome is not None
    assert outcome.open_imdb
    assert (outcome.state.year_min, outcome.state.year_max) == (2003, 2003)
    assert outcome.state.clicked_genre == "Dramas"


def test_titles_per_year_click_without_point_is_ignored():
    assert TitlesPerYearView().handle_click({}, FilterState()) is None
