from __future__ import annotations

from typing import Any, Dict, List, Type

from .base_view import BaseView


class ViewRegistry:
    """
    Catalog of chart view classes keyed by view id.

    The chart cards, the render callback outputs and the click routing are all
    built by walking {@link ids()}, so registration order is display order.

    Classes are stored rather than instances; {@link create()} builds a view
    with per-view options such as top_n. Registration rejects non-{@link BaseView}
    classes and duplicate ids.
    """

    def __init__(self):
        self._views: Dict[str, Type[BaseView]] = {}

    def register(self, view_cls: Type[BaseView]) -> None:
        """
        Register a {@link BaseView} with the registry

        :param view_cls: the subclass of {@link BaseView}

        Raises:
            TypeError: if view_cls is not a subclass of {@link BaseView}
            ValueError: if a view with same 'id' already exists
        """
        if not isinstance(view_cls, type) or not issubclass(view_cls, BaseView):
            raise TypeError(f"View '{getattr(view_cls, 'id', view_cls)}' must be a subclass of BaseView")

        if view_cls.id in self._views:
            raise ValueError(f"View '{view_cls.id}' already registered")

        self._views[view_cls.id] = view_cls

    def create(self, view_id: str, **options: Any) -> BaseView:
        """
        Instantiate a view for the given view_id
        :param view_id: the id of the view
        :param options: view-specific keyword options (e.g. top_n)
        :return: the instantiated view

        Raises:
            KeyError: if no view with the given id exists in the registry
        """
        try:
            cls = self._views[view_id]
        except KeyError:
            raise KeyError(f"View '{view_id}' not found")
        return cls(**options)

    def all_classes(self) -> List[Type[BaseView]]:
        """
        Registered view classes in registration order
        """
        return list(self._views.values())

    def ids(self) -> List[str]:
        return list(self._views.keys())

    def __contains__(self, view_id: str) -> bool:
        return view_id in self._views

    def __len__(self) -> int:
        return len(self._views)
