"""Test data factories and collaborator doubles."""

from typing import Any

from glance_session.schemas import (
    LoadRequest,
    PanelDescriptor,
    ProxyConfiguration,
    Route,
    RouteChange,
)


def create_proxy_configuration(name: str = "Test Config", **kwargs: Any) -> ProxyConfiguration:
    """Create a valid ProxyConfiguration with overrideable defaults."""
    defaults = {
        "definitions": {"Views": {"View3D": {"class": "View"}}},
        "representations": {},
        "views": ["View3D"],
    }
    data = {**defaults, **kwargs}
    return ProxyConfiguration(name=name, **data)


def create_panel(component: str = "info-panel", **kwargs: Any) -> PanelDescriptor:
    """Create a valid PanelDescriptor."""
    return PanelDescriptor(component=component, **kwargs)


class RecordingLoader:
    """DatasetLoader stand-in that records every batch instead of fetching."""

    def __init__(self, proxy_manager=None, store=None, readers=None) -> None:
        self.proxy_manager = proxy_manager
        self.store = store
        self.calls: list[tuple[str, list[LoadRequest]]] = []
        self.shut_down = False

    def load_remotes(self, group: str, load_requests: list[LoadRequest]) -> None:
        self.calls.append((group, list(load_requests)))

    def shutdown(self) -> None:
        self.shut_down = True


class FakeRouteStore:
    """Minimal route holder implementing the observer contract without Solara."""

    def __init__(self) -> None:
        self.route = Route.LANDING
        self._listeners: list = []

    def on_route_change(self, listener):
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _commit(self, route) -> None:
        if route == self.route:
            return
        change = RouteChange(previous=self.route, current=route)
        self.route = route
        for listener in list(self._listeners):
            listener(change)

    def show_app(self) -> None:
        self._commit(Route.APP)

    def show_landing(self) -> None:
        self._commit(Route.LANDING)


class FakeRouter:
    """Stand-in for the Solara router: a path, a query string and `push`."""

    def __init__(self, search: str = "", path: str = "/") -> None:
        self.search = search
        self.path = path
        self.pushed: list[str] = []

    def push(self, location: str) -> None:
        self.pushed.append(location)
        self.search = location if location.startswith("?") else ""
