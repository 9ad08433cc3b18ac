from __future__ import annotations

from pathlib import Path

import pandas as pd

from catalog_dash.config.model import GlobalConfig
from catalog_dash.core.dataset import Dataset
from catalog_dash.core.dataset_loader import normalize_records, year_bounds
from catalog_dash.core.filter_state import FilterState
from catalog_dash.core.tabs import TAB_IMDB, TAB_SUMMARY
from catalog_dash.ui.callbacks.callbacks_sync import apply_event
from catalog_dash.ui.config import AppConfig
from catalog_dash.ui.dash_app import _build_view_registry, _build_views
from catalog_dash.ui.ids import IDs, graph_id


def _make_ctx() -> AppConfig:
    records = normalize_records(
        pd.DataFrame(
            {
                "title": ["Alpha", "Beta", "Gamma"],
                "type": ["Movie", "TV Show", "Movie"],
                "release_year": [1999, 2005, 2012],
                "IMDB_rating": [7.0, 8.0, None],
            }
        )
    )
    year_min, year_max = year_bounds(records)
    ds = Dataset(name="tiny", records=records, year_min=year_min, year_max=year_max)

    global_config = GlobalConfig(config_root=Path("config"))
    registry = _build_view_registry()
    return AppConfig(
        config_root=Path("config"),
        global_config=global_config,
        dataset=ds,
        registry=registry,
        views=_build_views(registry, global_config),
    )


def test_control_inputs_update_state_and_keep_tab():
    ctx = _make_ctx()
    st = ctx.initial_state()

    result = apply_event(ctx, st, TAB_IMDB, IDs.Control.TYPE_SELECT, "Movie")
    assert result.state.type == "Movie"
    assert result.tab == TAB_IMDB

    result = apply_event(ctx, result.state, TAB_SUMMARY, IDs.Control.YEAR_MIN, 2000)
    assert result.state.year_min == 2000
    assert result.tab == TAB_SUMMARY

    result = apply_event(ctx, result.state, TAB_SUMMARY, IDs.Control.YEAR_MAX, None)
    assert result.state.year_max is None

    result = apply_event(ctx, result.state, TAB_SUMMARY, IDs.Control.IMDB_MIN, 7.5)
    assert result.state.imdb_min == 7.5


def test_unparseable_input_is_ignored():
    ctx = _make_ctx()
    assert apply_event(ctx, ctx.initial_state(), TAB_SUMMARY, IDs.Control.YEAR_MIN, "abc") is None


def test_reset_restores_dataset_extrema():
    ctx = _make_ctx()
    st = ctx.initial_state().pin_year(2005).drill_genre("Dramas").with_type("Movie")

    result = apply_event(ctx, st, TAB_IMDB, IDs.Control.RESET_BTN, 1)

    assert result.state == FilterState(year_min=1999, year_max=2012)
    assert result.tab == TAB_IMDB


def test_tab_buttons_switch_tab_only():
    ctx = _make_ctx()
    st = ctx.initial_state().drill_country("India")

    result = apply_event(ctx, st, TAB_SUMMARY, IDs.Control.TAB_IMDB_BTN, 1)
    assert result.tab == TAB_IMDB
    assert result.state == st

    result = apply_event(ctx, st, TAB_IMDB, IDs.Control.TAB_SUMMARY_BTN, 1)
    assert result.tab == TAB_SUMMARY


def test_chart_click_updates_state_and_opens_imdb():
    ctx = _make_ctx()
    click = {"points": [{"x": 2005, "y": 1, "customdata": 2005}]}

    result = apply_event(ctx, ctx.initial_state(), TAB_SUMMARY, graph_id("titles-per-year"), click)

    assert (result.state.year_min, result.state.year_max) == (2005, 2005)
    assert result.tab == TAB_IMDB


def test_country_click_sets_drilldown():
    ctx = _make_ctx()
    click = {"points": [{"x": 4, "y": "India", "customdata": "India"}]}

    result = apply_event(ctx, ctx.initial_state(), TAB_SUMMARY, graph_id("top-countries"), click)

    assert result.state.clicked_country == "India"
    assert result.tab == TAB_IMDB


def test_non_interactive_chart_and_malformed_clicks_are_ignored():
    ctx = _make_ctx()
    st = ctx.initial_state()

    assert apply_event(ctx, st, TAB_IMDB, graph_id("imdb-by-type"), {"points": [{"y": "Movie"}]}) is None
    assert apply_event(ctx, st, TAB_SUMMARY, graph_id("top-countries"), None) is None
    assert apply_event(ctx, st, TAB_SUMMARY, graph_id("top-countries"), {"points": []}) is None
    assert apply_event(ctx, st, TAB_SUMMARY, "not-a-component", 1) is None


def test_table_click_sets_title_and_keeps_tab():
    ctx = _make_ctx()
    table = [{"Title": "Beta"}, {"Title": "Alpha"}]

    result = apply_event(
        ctx,
        ctx.initial_state(),
        TAB_IMDB,
        IDs.Control.TOP_RATED_TABLE,
        {"row": 1, "column": 0, "column_id": "Title"},
        table_data=table,
    )

    assert result.state.clicked_title == "Alpha"
    assert result.tab == TAB_IMDB


def test_table_click_out_of_range_is_ignored():
    ctx = _make_ctx()
    assert apply_event(
        ctx,
        ctx.initial_state(),
        TAB_IMDB,
        IDs.Control.TOP_RATED_TABLE,
        {"row": 5, "column": 0},
        table_data=[{"Title": "Beta"}],
    ) is None
    assert apply_event(
        ctx, ctx.initial_state(), TAB_IMDB, IDs.Control.TOP_RATED_TABLE, None, table_data=[]
    ) is None
