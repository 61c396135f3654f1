"""UI root: the mounted application and its remote-loading entry point."""

import logging
from typing import Callable

import solara

from glance_session.schemas import PanelDescriptor, Route
from glance_session.services.url_args import pair_resources
from glance_session.vis.components import (
    AppView,
    BrowserWarning,
    LandingView,
)

logger = logging.getLogger(__name__)


class MountError(RuntimeError):
    """The UI could not be mounted on the requested container."""


class ViewerApp:
    """The UI tree bound to one store.

    Owns the mapping from panel component ids to the Solara components that
    render them, and the remote-loading entry point used by URL processing.
    """

    def __init__(self, container: str, store, loader) -> None:
        if not container:
            raise MountError(f"Invalid mount target: {container!r}")
        self.container = container
        self.store = store
        self.loader = loader
        self.panel_renderers: dict[str, Callable] = {}
        logger.info(f"Mounted viewer on {container}")

    def auto_load_remotes(self, label: str, urls, names) -> None:
        """Show the app view and start loading (name, url) pairs."""
        load_requests = pair_resources(names, urls)
        if not load_requests:
            return
        self.store.show_app()
        self.loader.load_remotes(label, load_requests)

    def register_panel(self, component) -> PanelDescriptor:
        """Add a panel to the store from an id, a descriptor or a component.

        Raises:
            ValueError: If the component id is already registered.
        """
        if isinstance(component, PanelDescriptor):
            panel = component
        elif isinstance(component, str):
            panel = PanelDescriptor(component=component)
        else:
            name = getattr(component, "name", None) or getattr(component, "__name__", "")
            panel = PanelDescriptor(component=name)
        self.store.add_panel(panel)
        if callable(component):
            self.panel_renderers[panel.component] = component
        return panel

    def render(self) -> solara.Element:
        return GlanceApp(app=self)


@solara.component
def GlanceApp(app: ViewerApp):
    store = app.store
    state = store.state.value

    with solara.Column(style="height: 100vh;"):
        solara.Title("Glance")
        if not state.suppress_browser_warning:
            BrowserWarning(on_dismiss=lambda: store.suppress_browser_warning(True))

        if state.route == Route.APP:
            AppView(
                state=state,
                renderers=app.panel_renderers,
                on_close=store.show_landing,
                on_toggle=store.collapse_dataset_panels,
            )
        else:
            LandingView(on_open=store.show_app)
