from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from catalog_dash.core.tabs import TAB_SUMMARY
from catalog_dash.ui.ids import IDs
from catalog_dash.ui.layout.build_chart_panels import (
    build_kpi_row,
    build_tab_buttons,
    build_view_groups,
)
from catalog_dash.ui.layout.build_filter_panel import build_filter_panel
from catalog_dash.ui.layout.build_navbar import build_navbar

if TYPE_CHECKING:
    from catalog_dash.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    navbar = build_navbar(ctx.global_config, ctx.dataset)

    if not ctx.is_loaded:
        return dbc.Container(
            fluid=True,
            className="cd-root",
            children=[navbar, build_load_error_panel(ctx.load_error)],
        )

    state = ctx.initial_state()

    return dbc.Container(
        fluid=True,
        className="cd-root",
        children=[
            navbar,

            # App-level stores
            dcc.Store(id=IDs.Store.FILTER_STATE, data=state.to_dict()),
            dcc.Store(id=IDs.Store.ACTIVE_TAB, data=TAB_SUMMARY),

            dbc.Row(
                [
                    dbc.Col(
                        build_filter_panel(ctx.dataset, state),
                        md=3,
                        className="mt-3",
                    ),
                    dbc.Col(
                        [
                            build_kpi_row(),
                            html.Div(id=IDs.Control.STATUS_BAR, className="cd-status mb-2"),
                            build_tab_buttons(TAB_SUMMARY),
                            build_view_groups(ctx.views, TAB_SUMMARY),
                        ],
                        md=9,
                        className="mt-3",
                    ),
                ],
                className="gx-3",
            ),
        ],
    )


def build_load_error_panel(reason: str | None) -> dbc.Alert:
    return dbc.Alert(
        [
            html.H4("The catalog could not be loaded", className="alert-heading"),
            html.P(reason or "Unknown error."),
            html.Hr(),
            html.P(
                "Check the data_file setting in config/global.json (or CATALOG_DASH_DATA_ROOT) "
                "and restart the app.",
                className="mb-0",
            ),
        ],
        id="load-error",
        color="danger",
        className="mt-4",
    )
