"""State management package for the viewer UI.

- store: Application view-state store (route, panels, UI flags, datasets)
"""

from glance_session.vis.state.store import AppStore

__all__ = ["AppStore"]
