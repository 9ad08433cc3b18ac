from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import dash
from dash import Input, Output, State, exceptions

from catalog_dash.core.filter_state import FilterState
from catalog_dash.core.tabs import TAB_IMDB, TAB_SUMMARY, resolve_tab
from catalog_dash.ui.ids import IDs, graph_id

if TYPE_CHECKING:
    from catalog_dash.ui.config import AppConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventResult:
    state: FilterState
    tab: str


def _first_point(click_data: Any) -> Optional[Dict[str, Any]]:
    if not isinstance(click_data, dict):
        return None
    points = click_data.get("points") or []
    if not points or not isinstance(points[0], dict):
        return None
    return points[0]


def _clicked_title(active_cell: Any, table_data: Optional[List[Dict[str, Any]]]) -> Optional[str]:
    if not isinstance(active_cell, dict) or not table_data:
        return None
    row = active_cell.get("row")
    if not isinstance(row, int) or not 0 <= row < len(table_data):
        return None
    return table_data[row].get("Title") or None


def apply_event(
        ctx: AppConfig,
        state: FilterState,
        tab: str,
        trigger: Optional[str],
        value: Any,
        table_data: Optional[List[Dict[str, Any]]] = None,
) -> Optional[EventResult]:
    """
    Pure helper: map one UI event to the next (FilterState, active tab).

    Returns None when the event changes nothing (malformed click payloads,
    clicks on non-interactive charts, unparseable numeric input).
    """
    tab = resolve_tab(tab)

    try:
        if trigger == IDs.Control.TYPE_SELECT:
            return EventResult(state.with_type(value), tab)
        if trigger == IDs.Control.YEAR_MIN:
            return EventResult(state.with_year_min(value), tab)
        if trigger == IDs.Control.YEAR_MAX:
            return EventResult(state.with_year_max(value), tab)
        if trigger == IDs.Control.IMDB_MIN:
            return EventResult(state.with_imdb_min(value), tab)
    except (TypeError, ValueError):
        logger.warning("Ignoring unparseable input", extra={"control": trigger, "value": repr(value)})
        return None

    if trigger == IDs.Control.RESET_BTN:
        return EventResult(FilterState.reset(ctx.dataset), tab)

    if trigger == IDs.Control.TAB_SUMMARY_BTN:
        return EventResult(state, TAB_SUMMARY)
    if trigger == IDs.Control.TAB_IMDB_BTN:
        return EventResult(state, TAB_IMDB)

    if trigger == IDs.Control.TOP_RATED_TABLE:
        title = _clicked_title(value, table_data)
        if title is None:
            return None
        return EventResult(state.drill_title(title), tab)

    for view in ctx.views:
        if trigger != graph_id(view.id):
            continue
        point = _first_point(value)
        if point is None:
            return None
        try:
            outcome = view.handle_click(point, state)
        except (TypeError, ValueError):
            logger.warning("Ignoring malformed click", extra={"view_id": view.id, "point": repr(point)})
            return None
        if outcome is None:
            return None
        return EventResult(outcome.state, TAB_IMDB if outcome.open_imdb else tab)

    return None


def register_sync_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    graph_inputs = [Input(graph_id(view.id), "clickData") for view in ctx.views]
    graph_ids = [graph_id(view.id) for view in ctx.views]

    # ---------------------------------------------------------
    # UI event -> FilterState + active tab (canonical)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        Output(IDs.Store.ACTIVE_TAB, "data"),
        Output(IDs.Control.TYPE_SELECT, "value"),
        Output(IDs.Control.YEAR_MIN, "value"),
        Output(IDs.Control.YEAR_MAX, "value"),
        Output(IDs.Control.IMDB_MIN, "value"),
        Output(IDs.Control.TOP_RATED_TABLE, "active_cell"),
        Input(IDs.Control.TYPE_SELECT, "value"),
        Input(IDs.Control.YEAR_MIN, "value"),
        Input(IDs.Control.YEAR_MAX, "value"),
        Input(IDs.Control.IMDB_MIN, "value"),
        Input(IDs.Control.RESET_BTN, "n_clicks"),
        Input(IDs.Control.TAB_SUMMARY_BTN, "n_clicks"),
        Input(IDs.Control.TAB_IMDB_BTN, "n_clicks"),
        Input(IDs.Control.TOP_RATED_TABLE, "active_cell"),
        *graph_inputs,
        State(IDs.Store.FILTER_STATE, "data"),
        State(IDs.Store.ACTIVE_TAB, "data"),
        State(IDs.Control.TOP_RATED_TABLE, "data"),
        prevent_initial_call=True,
    )
    def sync_state_from_ui(type_val, ymin_val, ymax_val, imdb_val, _reset, _tab_s, _tab_i,
                           active_cell, *rest):
        click_values = rest[:len(graph_ids)]
        fs_data, active_tab, table_data = rest[len(graph_ids):]

        triggered_id = dash.ctx.triggered_id
        values = {
            IDs.Control.TYPE_SELECT: type_val,
            IDs.Control.YEAR_MIN: ymin_val,
            IDs.Control.YEAR_MAX: ymax_val,
            IDs.Control.IMDB_MIN: imdb_val,
            IDs.Control.TOP_RATED_TABLE: active_cell,
            **dict(zip(graph_ids, click_values)),
        }

        try:
            state = FilterState.from_dict(fs_data or {})
        except (TypeError, ValueError):
            logger.exception("Invalid filter state in store: %r", fs_data)
            state = ctx.initial_state()

        result = apply_event(
            ctx,
            state,
            active_tab,
            triggered_id,
            values.get(triggered_id),
            table_data=table_data,
        )
        if result is None:
            raise exceptions.PreventUpdate

        logger.info(
            "filter_event",
            extra={"trigger": triggered_id, "tab": result.tab, "state": result.state.to_dict()},
        )

        new_state = result.state
        return (
            new_state.to_dict(),
            result.tab,
            new_state.type,
            new_state.year_min,
            new_state.year_max,
            new_state.imdb_min,
            None,
        )
