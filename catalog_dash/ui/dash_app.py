from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import dash_bootstrap_components as dbc
from dash import Dash

from catalog_dash.config.loader import load_global_config, resolve_data_path
from catalog_dash.config.model import GlobalConfig
from catalog_dash.core.base_view import BaseView
from catalog_dash.core.dataset_loader import load_dataset
from catalog_dash.core.exceptions import DatasetLoadError
from catalog_dash.core.view_registry import ViewRegistry
from catalog_dash.ui.callbacks.callbacks_render import register_render_callbacks
from catalog_dash.ui.callbacks.callbacks_sync import register_sync_callbacks
from catalog_dash.ui.config import AppConfig
from catalog_dash.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def _build_view_registry() -> ViewRegistry:
    from catalog_dash.views import (
        TitlesPerYearView,
        RatingCategoryView,
        TopCountriesView,
        GenreTreemapView,
        ImdbByTypeView,
        WordFrequencyView,
    )

    registry = ViewRegistry()
    registry.register(TitlesPerYearView)
    registry.register(RatingCategoryView)
    registry.register(TopCountriesView)
    registry.register(GenreTreemapView)
    registry.register(ImdbByTypeView)
    registry.register(WordFrequencyView)
    return registry


def _build_views(registry: ViewRegistry, global_config: GlobalConfig) -> List[BaseView]:
    options = {
        "top-countries": {"top_n": global_config.top_countries},
        "word-frequency": {"top_n": global_config.top_words},
    }
    return [registry.create(view_id, **options.get(view_id, {})) for view_id in registry.ids()]


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Views
    registry = _build_view_registry()
    views = _build_views(registry, global_config)

    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        registry=registry,
        views=views,
    )

    # 3) Load Dataset; failure leaves the app up with an explicit error page
    data_path = resolve_data_path(global_config)
    try:
        ctx.dataset = load_dataset(data_path)
    except DatasetLoadError as e:
        logger.exception("Catalog load failed", extra={"path": str(data_path)})
        ctx.load_error = str(e)

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title
    app.layout = build_layout(ctx)

    if ctx.is_loaded:
        ctx.validate()
        register_sync_callbacks(app, ctx)
        register_render_callbacks(app, ctx)

    return app
