from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "CATALOG_DASH_LOG_FORMAT"

_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _formatter(mode: str) -> logging.Formatter:
    if mode == "plain":
        return logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    return jsonlogger.JsonFormatter(_FIELDS)


def configure_logging(level: int = logging.INFO, force_format: Optional[str] = None) -> None:
    """
    Point the root logger at a single stderr handler.

    The format is `force_format` when given, else $CATALOG_DASH_LOG_FORMAT,
    else JSON. Only "plain" selects the human-readable formatter; structured
    `extra=` fields are kept as JSON keys in the default mode.
    """
    mode = (force_format or os.getenv(LOG_FORMAT_ENV, "json")).lower()

    handler = logging.StreamHandler()
    handler.setFormatter(_formatter(mode))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)
