from __future__ import annotations

__all__ = ["IDs", "graph_id"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"
        ACTIVE_TAB = "active-tab"

    class Control:
        TYPE_SELECT = "filter-type"
        YEAR_MIN = "year-min"
        YEAR_MAX = "year-max"
        IMDB_MIN = "imdb-min"
        RESET_BTN = "reset"

        # Tab buttons
        TAB_SUMMARY_BTN = "tab-summary"
        TAB_IMDB_BTN = "tab-imdb"

        # View groups
        SUMMARY_GROUP = "summary"
        IMDB_GROUP = "imdb"

        # KPIs
        KPI_IMDB = "kpi-imdb"
        KPI_VOTES = "kpi-votes"
        KPI_COUNT = "kpi-count"

        # Top-rated table
        TOP_RATED_TABLE = "top-rated-table"

        # Status bar
        STATUS_BAR = "status-bar"


def graph_id(view_id: str) -> str:
    """
    dcc.Graph id for a registered view.
    """
    return f"chart-{view_id}"
