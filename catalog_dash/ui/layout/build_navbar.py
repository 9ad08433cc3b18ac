from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from catalog_dash.config.model import GlobalConfig
from catalog_dash.core.dataset import Dataset


def build_navbar(global_config: GlobalConfig, dataset: Dataset | None) -> dbc.Navbar:
    if dataset is not None:
        meta = f"{dataset.name} · {dataset.n_records} titles"
        if dataset.year_min is not None:
            meta += f" · {dataset.year_min}-{dataset.year_max}"
    else:
        meta = "No catalog loaded"

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(global_config.subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    meta,
                    id="navbar-dataset-meta",
                    className="ms-auto text-muted navbar-dataset-block",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm cd-navbar",
    )
