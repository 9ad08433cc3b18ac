from __future__ import annotations

from typing import List, Optional

import dash_bootstrap_components as dbc
import plotly.graph_objs as go
from dash import dash_table, html

from catalog_dash.core.aggregations import TABLE_COLUMNS
from catalog_dash.core.filter_state import ALL_TYPES, FilterState

_FONT = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'


# -----------------------------------------------------------------------------
# Message figures
# -----------------------------------------------------------------------------
def message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def error_figure(details: str) -> go.Figure:
    return message_figure("Something went wrong while rendering this view.", details)


# -----------------------------------------------------------------------------
# Widgets
# -----------------------------------------------------------------------------
def type_options(types: List[str]) -> List[dict]:
    return [{"label": ALL_TYPES, "value": ALL_TYPES}] + [
        {"label": t, "value": t} for t in types
    ]


def kpi_card(label: str, component_id: str) -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            [
                html.Div(label, className="kpi-label text-muted"),
                html.H3("0", id=component_id, className="kpi-value mb-0"),
            ]
        ),
        className="kpi-card",
    )


def top_rated_table(component_id: str, max_height: str = "420px") -> dash_table.DataTable:
    """
    Styled DataTable for the top-rated titles; rows are filled by the render callback.
    """
    return dash_table.DataTable(
        id=component_id,
        data=[],
        columns=[{"name": c, "id": c} for c in TABLE_COLUMNS],

        # ---- FONT + LOOK & FEEL ----
        style_table={
            "overflowX": "auto",
            "overflowY": "auto",
            "maxHeight": max_height,
        },
        fixed_rows={"headers": True},
        style_as_list_view=True,
        style_cell={
            "fontFamily": _FONT,
            "fontSize": "12px",
            "padding": "6px 8px",
            "border": "none",
            "textAlign": "left",
            "minWidth": "60px",
            "maxWidth": "320px",
            "whiteSpace": "nowrap",
            "textOverflow": "ellipsis",
            "cursor": "pointer",
        },
        style_header={
            "fontFamily": _FONT,
            "fontSize": "12px",
            "fontWeight": "600",
            "backgroundColor": "#f3f4f6",
            "borderBottom": "1px solid #e5e7eb",
        },
        style_data={
            "borderBottom": "1px solid #e5e7eb",
        },
        page_action="none",
        sort_action="none",
        filter_action="none",
    )


def status_bar(state: FilterState, n_records: int) -> html.Span:
    """
    One-line summary of the active filters.
    """
    years = f"{state.year_min or 'any'} to {state.year_max or 'any'}"
    parts: List = [
        html.Strong("Titles: "), str(n_records), " • ",
        html.Strong("Type: "), state.type, " • ",
        html.Strong("Years: "), years, " • ",
        html.Strong("IMDB ≥ "), f"{state.imdb_min:g}",
    ]
    for label, value in state.active_drilldowns():
        parts.extend([" • ", html.Strong(f"{label}: "), value])
    return html.Span(parts)

