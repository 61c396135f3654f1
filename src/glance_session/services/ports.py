"""Ports (interfaces) for the session layer.

These protocols define the boundaries between session orchestration and the
browser/host-specific collaborators. They are intentionally small so the
navigation and URL logic can be exercised without a running page.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from glance_session.schemas import HistoryEntry, LoadRequest

PopStateListener = Callable[["HistoryEntry | None"], None]


@runtime_checkable
class BrowserHistory(Protocol):
    """The page's navigation history stack."""

    @property
    def state(self) -> "HistoryEntry | None":
        """Payload of the current entry (None when the entry carries none)."""

    def push_state(self, entry: "HistoryEntry") -> None:
        """Append an entry after the current one, dropping forward entries."""

    def replace_state(self, entry: "HistoryEntry") -> None:
        """Overwrite the current entry's payload."""

    def back(self) -> None:
        """Step back one entry and notify popstate listeners."""

    def add_popstate_listener(self, listener: PopStateListener) -> Callable[[], None]:
        """Register a back/forward listener; returns a remover."""


@runtime_checkable
class PageLocation(Protocol):
    """Live view of the page URL."""

    @property
    def search(self) -> str:
        """Current query string, with or without the leading '?'."""


@runtime_checkable
class DatasetLoadService(Protocol):
    """Batched remote dataset loading (fire-and-forget)."""

    def load_remotes(self, group: str, load_requests: "list[LoadRequest]") -> None:
        """Start loading every request; must not block on completion."""
