from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output

from catalog_dash.core.aggregations import format_kpis
from catalog_dash.core.dashboard import recompute
from catalog_dash.core.filter_state import FilterState
from catalog_dash.core.tabs import TAB_IMDB, TAB_SUMMARY, resolve_tab, tab_visibility
from catalog_dash.ui.helpers import error_figure, status_bar
from catalog_dash.ui.ids import IDs, graph_id

if TYPE_CHECKING:
    from catalog_dash.ui.config import AppConfig

logger = logging.getLogger(__name__)


def render_outputs(ctx: AppConfig, fs_data: dict[str, Any] | None, active_tab: str | None) -> tuple:
    """
    Full re-render: (figures..., kpi imdb, kpi votes, kpi count, table rows,
    status bar, summary style, imdb style, summary active, imdb active).
    """
    tab = resolve_tab(active_tab)
    summary_style, imdb_style = tab_visibility(tab)
    tab_flags = (tab == TAB_SUMMARY, tab == TAB_IMDB)

    state = FilterState.from_dict(fs_data) if fs_data else ctx.initial_state()

    snapshot = recompute(
        ctx.dataset,
        state,
        ctx.views,
        table_row_cap=ctx.global_config.table_row_cap,
    )

    figures = []
    for view in ctx.views:
        try:
            figures.append(view.render_figure(snapshot.view_data[view.id]))
        except Exception:
            logger.exception("Error rendering view", extra={"view_id": view.id})
            figures.append(error_figure("If this keeps happening, grab the logs and open an issue."))

    kpis = format_kpis(snapshot.kpis)

    return (
        *figures,
        kpis["imdb"],
        kpis["votes"],
        kpis["count"],
        snapshot.table,
        status_bar(state, len(snapshot.records)),
        summary_style,
        imdb_style,
        *tab_flags,
    )


def _error_outputs(ctx: AppConfig, active_tab: str | None) -> tuple:
    tab = resolve_tab(active_tab)
    summary_style, imdb_style = tab_visibility(tab)
    figures = [
        error_figure("The app hit an unexpected error. Try resetting the filters.")
        for _ in ctx.views
    ]
    return (
        *figures,
        "0.00",
        "0",
        "0",
        [],
        "Status: error while rendering",
        summary_style,
        imdb_style,
        tab == TAB_SUMMARY,
        tab == TAB_IMDB,
    )


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # (FilterState, active tab) -> every chart, KPI and the table
    # ---------------------------------------------------------
    @app.callback(
        *[Output(graph_id(view.id), "figure") for view in ctx.views],
        Output(IDs.Control.KPI_IMDB, "children"),
        Output(IDs.Control.KPI_VOTES, "children"),
        Output(IDs.Control.KPI_COUNT, "children"),
        Output(IDs.Control.TOP_RATED_TABLE, "data"),
        Output(IDs.Control.STATUS_BAR, "children"),
        Output(IDs.Control.SUMMARY_GROUP, "style"),
        Output(IDs.Control.IMDB_GROUP, "style"),
        Output(IDs.Control.TAB_SUMMARY_BTN, "active"),
        Output(IDs.Control.TAB_IMDB_BTN, "active"),
        Input(IDs.Store.FILTER_STATE, "data"),
        # The tab is an input so every switch re-renders at the visible size
        Input(IDs.Store.ACTIVE_TAB, "data"),
    )
    def render_dashboard(fs_data: dict[str, Any] | None, active_tab: str | None):
        try:
            return render_outputs(ctx, fs_data, active_tab)
        except Exception:
            logger.exception(
                "Error in render_dashboard",
                extra={"filter_state": fs_data, "tab": active_tab},
            )
            return _error_outputs(ctx, active_tab)
