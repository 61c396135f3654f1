"""History-based navigation between the landing and app views.

Keeps the store's route and the current history entry's `app` flag in
agreement:

    route -> landing, entry.app is True   : history.back()
    route -> app,     entry.app is falsy  : history.push_state({app: True})
    popstate with entry.app True           : commit route app
    popstate otherwise                     : commit route landing

Route commits leave history untouched while `is_disabled()` returns True
(the `noHistory` setting); popstate events are always honored.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from glance_session.schemas import HistoryEntry, Route, RouteChange

if TYPE_CHECKING:
    from glance_session.services.ports import BrowserHistory
    from glance_session.vis.state.store import AppStore

logger = logging.getLogger(__name__)


class NavigationStateMachine:
    """Mirrors route commits into the history stack and back.

    Works against any object exposing `on_route_change`, `show_app` and
    `show_landing`, so it can be driven without a UI.
    """

    def __init__(
        self,
        history: "BrowserHistory",
        is_disabled: Callable[[], bool] = lambda: False,
    ) -> None:
        self.history = history
        self.is_disabled = is_disabled
        self.store: "AppStore | None" = None
        self._unbinders: list[Callable[[], None]] = []

    def initialize(self) -> None:
        """Replace the current entry with the landing baseline.

        Must run before `bind` so setup does not trigger transitions.
        """
        self.history.replace_state(HistoryEntry(app=False))

    def bind(self, store: "AppStore") -> None:
        """Install the route watcher and the back/forward listener."""
        self.store = store
        self.bind_route_watcher(store)
        self.bind_popstate_listener()

    def bind_route_watcher(self, store: "AppStore") -> None:
        self.store = store
        self._unbinders.append(store.on_route_change(self.on_route_change))

    def bind_popstate_listener(self) -> None:
        self._unbinders.append(self.history.add_popstate_listener(self.on_popstate))

    def unbind(self) -> None:
        for unbind in self._unbinders:
            unbind()
        self._unbinders = []

    def on_route_change(self, change: RouteChange | Route) -> None:
        """Push or unwind history so the current entry matches the route."""
        if self.is_disabled():
            return
        route = change.current if isinstance(change, RouteChange) else Route(change)
        entry = self.history.state
        in_app = bool(entry is not None and entry.app)

        if route == Route.LANDING and in_app:
            logger.debug("Route landing: unwinding history")
            self.history.back()
        elif route == Route.APP and not in_app:
            logger.debug("Route app: pushing history entry")
            self.history.push_state(HistoryEntry(app=True))

    def on_popstate(self, entry: HistoryEntry | dict | None) -> None:
        """Commit the route carried by a back/forward navigation."""
        if self.store is None:
            return
        if isinstance(entry, dict):
            entry = HistoryEntry(**entry)
        if entry is not None and entry.app:
            self.store.show_app()
        else:
            self.store.show_landing()
