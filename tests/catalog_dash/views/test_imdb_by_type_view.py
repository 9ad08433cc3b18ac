import pandas as pd
import pytest

from catalog_dash.core.dataset_loader import normalize_records
from catalog_dash.core.filter_state import FilterState
from catalog_dash.core.tabs import TAB_IMDB
from catalog_dash.views.imdb_by_type_view import ImdbByTypeView


def test_imdb_by_type_render_fixed_axis():
    records = normalize_records(
        pd.DataFrame(
            {
                "title": list("abc"),
                "type": ["Movie", "Movie", "TV Show"],
                "IMDB_rating": [6.0, 8.0, 9.0],
            }
        )
    )
    view = ImdbByTypeView()

    fig = view.render_figure(view.compute_data(records))

    bar = fig.data[0]
    assert list(bar.y) == ["TV Show", "Movie"]
    assert list(bar.x) == pytest.approx([9.0, 7.0])
    assert tuple(fig.layout.xaxis.range) == (0, 10)
    assert view.tab == TAB_IMDB


def test_imdb_by_type_is_not_clickable():
    assert ImdbByTypeView().handle_click({"y": "Movie"}, FilterState()) is None
