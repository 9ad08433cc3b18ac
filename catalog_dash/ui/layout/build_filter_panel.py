from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from catalog_dash.core.dataset import Dataset
from catalog_dash.core.filter_state import ALL_TYPES, FilterState
from catalog_dash.ui.helpers import type_options
from catalog_dash.ui.ids import IDs


def _numeric_input(label: str, component_id: str, value, **kwargs) -> html.Div:
    return html.Div(
        [
            html.Label(label, htmlFor=component_id, className="form-label"),
            dcc.Input(
                id=component_id,
                type="number",
                value=value,
                debounce=True,
                className="form-control mb-3",
                **kwargs,
            ),
        ]
    )


def build_filter_panel(dataset: Dataset, state: FilterState) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Label("Type", htmlFor=IDs.Control.TYPE_SELECT, className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.TYPE_SELECT,
                        options=type_options(dataset.types()),
                        value=state.type or ALL_TYPES,
                        clearable=False,
                        className="mb-3",
                    ),
                    _numeric_input(
                        "Release year from",
                        IDs.Control.YEAR_MIN,
                        state.year_min,
                        step=1,
                    ),
                    _numeric_input(
                        "Release year to",
                        IDs.Control.YEAR_MAX,
                        state.year_max,
                        step=1,
                    ),
                    _numeric_input(
                        "Minimum IMDB rating",
                        IDs.Control.IMDB_MIN,
                        state.imdb_min,
                        min=0,
                        max=10,
                        step=0.1,
                    ),
                    dbc.Button(
                        "Reset filters",
                        id=IDs.Control.RESET_BTN,
                        color="secondary",
                        size="sm",
                        className="w-100",
                    ),
                ]
            ),
        ],
        className="cd-sidebar",
    )
