from __future__ import annotations

from typing import List, Sequence

import dash_bootstrap_components as dbc
from dash import dcc, html

from catalog_dash.core.base_view import BaseView
from catalog_dash.core.tabs import TAB_IMDB, TAB_SUMMARY, tab_visibility
from catalog_dash.ui.helpers import kpi_card, top_rated_table
from catalog_dash.ui.ids import IDs, graph_id


def _chart_card(view: BaseView) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(html.Strong(view.label), className="p-2"),
            dbc.CardBody(
                dcc.Graph(
                    id=graph_id(view.id),
                    style={"height": f"{view.height}px"},
                    config={"displayModeBar": False, "responsive": True},
                ),
                className="p-1",
            ),
        ],
        className="cd-chartcard mb-3",
    )


def _grid(cards: List[dbc.Card]) -> dbc.Row:
    return dbc.Row([dbc.Col(card, md=6) for card in cards], className="gx-3")


def build_kpi_row() -> dbc.Row:
    return dbc.Row(
        [
            dbc.Col(kpi_card("Average IMDB rating", IDs.Control.KPI_IMDB), md=4),
            dbc.Col(kpi_card("Total IMDB votes", IDs.Control.KPI_VOTES), md=4),
            dbc.Col(kpi_card("Titles", IDs.Control.KPI_COUNT), md=4),
        ],
        className="gx-3 mb-3",
    )


def build_tab_buttons(active: str = TAB_SUMMARY) -> dbc.ButtonGroup:
    return dbc.ButtonGroup(
        [
            dbc.Button(
                "Summary",
                id=IDs.Control.TAB_SUMMARY_BTN,
                color="danger",
                outline=True,
                active=active == TAB_SUMMARY,
            ),
            dbc.Button(
                "IMDB exploration",
                id=IDs.Control.TAB_IMDB_BTN,
                color="danger",
                outline=True,
                active=active == TAB_IMDB,
            ),
        ],
        className="mb-3",
    )


def build_view_groups(views: Sequence[BaseView], active: str = TAB_SUMMARY) -> html.Div:
    summary_style, imdb_style = tab_visibility(active)

    summary_cards = [_chart_card(v) for v in views if v.tab == TAB_SUMMARY]
    imdb_cards = [_chart_card(v) for v in views if v.tab == TAB_IMDB]

    table_card = dbc.Card(
        [
            dbc.CardHeader(html.Strong("Top rated titles"), className="p-2"),
            dbc.CardBody(top_rated_table(IDs.Control.TOP_RATED_TABLE), className="p-1"),
        ],
        className="cd-chartcard mb-3",
    )

    return html.Div(
        [
            html.Div(_grid(summary_cards), id=IDs.Control.SUMMARY_GROUP, style=summary_style),
            html.Div(
                [_grid(imdb_cards), table_card],
                id=IDs.Control.IMDB_GROUP,
                style=imdb_style,
            ),
        ]
    )
