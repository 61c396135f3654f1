"""Browser history adapters and page locations."""

import logging
from typing import Callable
from urllib.parse import parse_qsl, urlencode

from glance_session.schemas import HistoryEntry
from glance_session.schemas.defaults import URL_VIEW_APP, URL_VIEW_PARAM

logger = logging.getLogger(__name__)


class InMemoryHistory:
    """A history stack with browser semantics.

    Unlike a browser, `back`/`forward`/`go` dispatch popstate synchronously,
    so listeners observe the new entry before the call returns.
    """

    def __init__(self, initial: HistoryEntry | None = None) -> None:
        self.entries: list[HistoryEntry | None] = [initial]
        self.index = 0
        self._listeners: list[Callable] = []

    @property
    def state(self) -> HistoryEntry | None:
        return self.entries[self.index]

    @property
    def length(self) -> int:
        return len(self.entries)

    def push_state(self, entry: HistoryEntry) -> None:
        del self.entries[self.index + 1 :]
        self.entries.append(entry)
        self.index += 1

    def replace_state(self, entry: HistoryEntry) -> None:
        self.entries[self.index] = entry

    def back(self) -> None:
        self.go(-1)

    def forward(self) -> None:
        self.go(1)

    def go(self, delta: int) -> None:
        target = self.index + delta
        if delta == 0 or not 0 <= target < len(self.entries):
            return
        self.index = target
        self._dispatch(self.entries[target])

    def add_popstate_listener(self, listener: Callable) -> Callable[[], None]:
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def _dispatch(self, entry: HistoryEntry | None) -> None:
        logger.debug(f"popstate -> {entry}")
        for listener in list(self._listeners):
            listener(entry)


class StaticLocation:
    """Page location whose query string can be reassigned (tests, scripts)."""

    def __init__(self, search: str = "") -> None:
        self.search = search


def _query(search: str | None) -> str:
    query = search or ""
    return query[1:] if query.startswith("?") else query


def _is_app_view(query: str) -> bool:
    return dict(parse_qsl(query, keep_blank_values=True)).get(URL_VIEW_PARAM) == URL_VIEW_APP


def _with_view(query: str, app: bool) -> str:
    params = [(k, v) for k, v in parse_qsl(query, keep_blank_values=True) if k != URL_VIEW_PARAM]
    if app:
        params.append((URL_VIEW_PARAM, URL_VIEW_APP))
    return urlencode(params)


class RouterHistory(InMemoryHistory):
    """History mirrored onto a Solara router's query string.

    Each entry's `app` flag is written to the URL as `view=app`; the other
    query parameters are left as they are. A router change this object did
    not make (the browser's back/forward buttons) is dispatched as popstate
    through `sync_location`.

    The router has no back or replace, so both push the target location.
    Also serves as the page location read by URL processing.
    """

    def __init__(self, router) -> None:
        self.router = router
        self._current = _query(router.search)
        super().__init__(HistoryEntry(app=_is_app_view(self._current)))

    @property
    def search(self) -> str:
        return self.router.search or ""

    def push_state(self, entry: HistoryEntry) -> None:
        super().push_state(entry)
        self._navigate(entry)

    def replace_state(self, entry: HistoryEntry) -> None:
        super().replace_state(entry)
        self._navigate(entry)

    def go(self, delta: int) -> None:
        target = self.index + delta
        if delta == 0 or not 0 <= target < len(self.entries):
            return
        self._navigate(self.entries[target])
        super().go(delta)

    def sync_location(self) -> None:
        """Treat an unexpected router change as back/forward navigation."""
        query = _query(self.router.search)
        if query == self._current:
            return
        self._current = query
        entry = HistoryEntry(app=_is_app_view(query))
        if self.index > 0 and self.entries[self.index - 1] == entry:
            self.index -= 1
        elif self.index + 1 < len(self.entries) and self.entries[self.index + 1] == entry:
            self.index += 1
        else:
            self.entries[self.index] = entry
        self._dispatch(entry)

    def _navigate(self, entry: HistoryEntry | None) -> None:
        app = bool(entry is not None and entry.app)
        if app == _is_app_view(self._current):
            return
        query = _with_view(self._current, app)
        self._current = query
        self.router.push(f"?{query}" if query else self.router.path)
