from __future__ import annotations
from typing import Dict, Iterator, List, Type

from .chart_data import ChartData
from .base_view import BaseView


class ViewRegistry:
    """
    Chart view classes keyed by view id.

    Callbacks look views up by id and build a fresh instance over the shared
    ChartData on every render, so no view holds state between callbacks.
    Registration order is the order the charts appear on the page.
    """

    def __init__(self):
        self._views: Dict[str, Type[BaseView]] = {}

    def register(self, view_cls: Type[BaseView]) -> None:
        """
        Raises:
            TypeError: view_cls is not a BaseView subclass or has no id
            ValueError: the id is already taken
        """
        if not isinstance(view_cls, type) or not issubclass(view_cls, BaseView):
            raise TypeError(f"{view_cls!r} is not a BaseView subclass")
        if not view_cls.id:
            raise TypeError(f"{view_cls.__name__} has no view id")
        if view_cls.id in self._views:
            raise ValueError(f"View '{view_cls.id}' already registered")

        self._views[view_cls.id] = view_cls

    def __contains__(self, view_id: str) -> bool:
        return view_id in self._views

    def __iter__(self) -> Iterator[str]:
        return iter(self._views)

    def create(self, view_id: str, data: ChartData) -> BaseView:
        try:
            cls = self._views[view_id]
        except KeyError:
            raise KeyError(f"View '{view_id}' not found")
        return cls(data)

    def unavailable(self, data: ChartData) -> List[str]:
        """Ids of the views that will show the 'could not be loaded' figure."""
        return [view_id for view_id in self._views if not self.create(view_id, data).available]

    def all_classes(self) -> List[Type[BaseView]]:
        return list(self._views.values())
