from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from catalog_dash.config.model import GlobalConfig
from catalog_dash.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

_POSITIVE_INT_KEYS = ("top_countries", "top_words", "table_row_cap")


def load_global_config(root: Path | str) -> GlobalConfig:
    """
    Load config/global.json from the given config root.

    A missing file is not fatal: the dashboard runs on defaults.
    """
    root = Path(root)
    global_path = root / "global.json"

    logger.info("Loading global config", extra={"config_root": str(root)})

    if not global_path.is_file():
        logger.warning(f"No global.json found at {global_path}, using defaults")
        return GlobalConfig(config_root=root)

    try:
        with global_path.open() as f:
            raw: Dict[str, Any] = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    for key in _POSITIVE_INT_KEYS:
        if key in raw:
            value = raw[key]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ConfigError(f"'{key}' must be a positive integer, got {value!r}")

    defaults = GlobalConfig(config_root=root)
    return GlobalConfig(
        config_root=root,
        ui_title=raw.get("ui_title", defaults.ui_title),
        subtitle=raw.get("subtitle", defaults.subtitle),
        data_file=raw.get("data_file", defaults.data_file),
        top_countries=raw.get("top_countries", defaults.top_countries),
        top_words=raw.get("top_words", defaults.top_words),
        table_row_cap=raw.get("table_row_cap", defaults.table_row_cap),
    )


def resolve_data_path(cfg: GlobalConfig) -> Path:
    """
    Resolve cfg.data_file to an absolute path.

    Relative paths use CATALOG_DASH_DATA_ROOT when set, otherwise the
    parent of the config root (the repo root in the default layout).
    """
    path = Path(cfg.data_file)
    if path.is_absolute():
        return path

    data_root = os.environ.get("CATALOG_DASH_DATA_ROOT")
    if data_root:
        root_path = Path(data_root)
        resolved = root_path / path

        # Fallback for redundant 'data/' prefix
        if not resolved.is_file() and path.parts and path.parts[0] == "data":
            alt_path = root_path / Path(*path.parts[1:])
            if alt_path.is_file():
                resolved = alt_path
        return resolved

    return (cfg.config_root.parent / path).resolve()
