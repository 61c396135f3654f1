"""Application view-state store.

Holds the route, registered dataset panels, UI flags mirrored from settings,
and the records of remote dataset loads. State is a frozen AppState wrapped in
a Solara reactive so components re-render on every commit.
"""

import logging
import threading
from typing import Any, Callable

import solara

from glance_session.schemas import (
    AppState,
    DatasetRecord,
    PanelDescriptor,
    Route,
    RouteChange,
)

logger = logging.getLogger(__name__)

RouteListener = Callable[[RouteChange], None]


class AppStore:
    """Reactive application store with named commits.

    Route observers are called synchronously, inside the commit that changed
    the route, after the new state is visible through `state.value`.
    """

    def __init__(self, proxy_manager=None, provider: Any = None) -> None:
        """Initialize the store with its collaborators.

        Args:
            proxy_manager: Rendering proxy manager shared with the UI.
            provider: Optional auxiliary data provider exposed to components.
        """
        self.proxy_manager = proxy_manager
        self.provider = provider
        self.state: solara.Reactive[AppState] = solara.reactive(AppState())
        self._route_listeners: list[RouteListener] = []
        # Loader threads commit datasets while the UI commits routes
        self._lock = threading.RLock()

    @property
    def route(self) -> Route:
        return self.state.value.route

    def update(self, **changes: Any) -> None:
        """Apply `changes` to the state in one transaction."""
        with self._lock:
            previous = self.state.value
            current = previous.model_copy(update=changes)
            self.state.value = current

        current_route = current.route
        if current_route != previous.route:
            logger.debug(f"Route {previous.route.value} -> {current_route.value}")
            event = RouteChange(previous=previous.route, current=current_route)
            for listener in list(self._route_listeners):
                listener(event)

    # --- Observers ---

    def on_route_change(self, listener: RouteListener) -> Callable[[], None]:
        """Register a route observer; returns a function that removes it."""
        self._route_listeners.append(listener)

        def remove() -> None:
            if listener in self._route_listeners:
                self._route_listeners.remove(listener)

        return remove

    def subscribe(self, listener: Callable[[AppState], None]) -> Callable[[], None]:
        """Call `listener` with the new state after every effective commit."""
        return self.state.subscribe(listener)

    def subscribe_change(
        self, listener: Callable[[AppState, AppState], None]
    ) -> Callable[[], None]:
        """Call `listener(new, old)` after every effective commit."""
        return self.state.subscribe_change(listener)

    # --- Commits ---

    def show_app(self) -> None:
        self.update(route=Route.APP)

    def show_landing(self) -> None:
        self.update(route=Route.LANDING)

    def add_panel(self, panel: PanelDescriptor) -> None:
        """Register a dataset panel.

        Raises:
            ValueError: If a panel with the same component id exists.
        """
        with self._lock:
            panels = self.state.value.panels
            if any(p.component == panel.component for p in panels):
                raise ValueError(f"Panel component already registered: {panel.component}")
            self.update(panels=panels + [panel])

    def collapse_dataset_panels(self, value: bool) -> None:
        self.update(collapse_dataset_panels=bool(value))

    def suppress_browser_warning(self, value: bool) -> None:
        self.update(suppress_browser_warning=bool(value))

    def add_dataset(self, record: DatasetRecord) -> None:
        with self._lock:
            self.update(datasets=self.state.value.datasets + [record])
