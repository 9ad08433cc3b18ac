from __future__ import annotations

from typing import Dict, Tuple

TAB_SUMMARY = "summary"
TAB_IMDB = "imdb"
TABS = (TAB_SUMMARY, TAB_IMDB)

_HIDDEN: Dict[str, str] = {"display": "none"}
_SHOWN: Dict[str, str] = {}


def resolve_tab(value: str | None) -> str:
    """
    Anything that is not a known tab falls back to the summary tab.
    """
    return value if value in TABS else TAB_SUMMARY


def tab_visibility(active: str | None) -> Tuple[Dict[str, str], Dict[str, str]]:
    """
    Styles for (summary group, imdb group): exactly one of them is visible.
    """
    if resolve_tab(active) == TAB_IMDB:
        return dict(_HIDDEN), dict(_SHOWN)
    return dict(_SHOWN), dict(_HIDDEN)
