from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from catalog_dash.config.model import GlobalConfig
from catalog_dash.core.base_view import BaseView
from catalog_dash.core.dataset import Dataset
from catalog_dash.core.filter_state import FilterState
from catalog_dash.core.view_registry import ViewRegistry


@dataclass
class AppConfig:
    """
    Shared context for layout builders and callback registration, passed in
    instead of module-level globals.

    Exactly one of `dataset` / `load_error` is set once the app is built.
    """
    config_root: Path
    global_config: GlobalConfig
    dataset: Optional[Dataset] = None
    load_error: Optional[str] = None

    registry: Optional[ViewRegistry] = None
    views: List[BaseView] = field(default_factory=list)

    @property
    def is_loaded(self) -> bool:
        return self.dataset is not None

    def initial_state(self) -> FilterState:
        if self.dataset is None:
            return FilterState()
        return FilterState.initial(self.dataset)

    def view_by_id(self, view_id: str) -> Optional[BaseView]:
        for view in self.views:
            if view.id == view_id:
                return view
        return None

    def validate(self) -> None:
        """Ensure all required services are attached before callbacks are registered."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
        if self.dataset is None:
            raise RuntimeError("AppConfig.dataset must be loaded before registering callbacks.")
