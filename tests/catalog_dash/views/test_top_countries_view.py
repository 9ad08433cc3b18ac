import pandas as pd

from catalog_dash.core.dataset_loader import normalize_records
from catalog_dash.core.filter_state import FilterState
from catalog_dash.views.top_countries_view import TopCountriesView


def test_top_countries_respects_top_n():
    records = normalize_records(
        pd.DataFrame(
            {
                "title": list("abc"),
                "country": ["India, United States", "United States, France", "Spain"],
            }
        )
    )
    view = TopCountriesView(top_n=2)

    data = view.compute_data(records)
    fig = view.render_figure(data)

    assert list(data["country"]) == ["United States", "India"]
    assert list(fig.data[0].customdata) == ["United States", "India"]


def test_top_countries_click_sets_country():
    outcome = TopCountriesView().handle_click(
        {"x": 3, "y": "India", "customdata": "India"}, FilterState(clicked_genre="Dramas")
    )

    assert outcome.open_imdb
    assert outcome.state.clicked_country == "India"
    assert outcome.state.clicked_genre == "Dramas"


def test_top_countries_click_falls_back_to_label():
    outcome = TopCountriesView().handle_click({"y": "France"}, FilterState())
    assert outcome.state.clicked_country == "France"
