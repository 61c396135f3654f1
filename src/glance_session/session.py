"""Session facade - the single entry point that wires a viewer together.

`create_session` composes configuration resolution, the settings store, the
application store, the UI root and history navigation, in this order:

1. Resolve the proxy configuration and build the proxy manager.
2. Open the settings store.
3. Build the application store (proxy manager + auxiliary provider).
4. Mount the UI root.
5. Replace the current history entry with the landing baseline and force
   `noHistory` back to False.
6. Bind the route watcher, then the back/forward listener.
7. Seed the store from the `collapseDatasetPanels` and
   `suppressBrowserWarning` settings.

Listeners stay bound until `Session.close()`. Creating a second session on
the same page without closing the first leaves both bound.
"""

import logging
from typing import Any, Callable

from glance_session.infrastructure.history import InMemoryHistory, StaticLocation
from glance_session.schemas import LoadBatch, PanelDescriptor, ProxyConfiguration
from glance_session.schemas.defaults import (
    SETTING_COLLAPSE_DATASET_PANELS,
    SETTING_NO_HISTORY,
    SETTING_SUPPRESS_BROWSER_WARNING,
)
from glance_session.services.loader import DatasetLoader
from glance_session.services.navigation import NavigationStateMachine
from glance_session.services.ports import BrowserHistory, PageLocation
from glance_session.services.proxy_config import ProxyConfigRegistry, registry
from glance_session.services.proxy_manager import ProxyManager, proxy_manager_factory
from glance_session.services.readers import ReaderFactory, reader_factory
from glance_session.services.settings import SettingsStore, SyncDirective
from glance_session.services.url_args import process_url_args
from glance_session.vis.app import ViewerApp
from glance_session.vis.state.store import AppStore

logger = logging.getLogger(__name__)


class Session:
    """Handle returned by `create_session`."""

    def __init__(
        self,
        proxy_manager: ProxyManager,
        store: AppStore,
        settings: SettingsStore,
        app: ViewerApp,
        navigation: NavigationStateMachine,
        location,
        loader: DatasetLoader,
    ) -> None:
        self.proxy_manager = proxy_manager
        self.store = store
        self.settings = settings
        self.app = app
        self.navigation = navigation
        self.location = location
        self.loader = loader

    def process_url_args(self) -> LoadBatch | None:
        """Apply `setting.*` parameters, then hand name/url pairs to the UI."""

        def forward(batch: LoadBatch) -> None:
            self.app.auto_load_remotes(
                batch.group,
                [r.url for r in batch.requests],
                [r.name for r in batch.requests],
            )

        return process_url_args(lambda: self.location.search, self.settings.set, forward)

    def add_dataset_panel(self, component) -> PanelDescriptor:
        """Register a dataset panel; component ids must be unique."""
        return self.app.register_panel(component)

    def show_app(self) -> None:
        self.store.show_app()

    def show_landing(self) -> None:
        self.store.show_landing()

    def get_setting(self, name: str) -> Any:
        return self.settings.get(name)

    def set_setting(self, name: str, value: Any) -> None:
        return self.settings.set(name, value)

    def close(self) -> None:
        """Unbind history/settings listeners and stop the loader."""
        self.navigation.unbind()
        self.settings.unbind()
        self.loader.shutdown()
        logger.info(f"Closed session on {self.app.container}")


def create_session(
    container: str,
    proxy_config: ProxyConfiguration | None = None,
    *,
    config_registry: ProxyConfigRegistry | None = None,
    history: BrowserHistory | None = None,
    location: PageLocation | None = None,
    settings: SettingsStore | None = None,
    provider: Any = None,
    readers: ReaderFactory = reader_factory,
    make_proxy_manager: Callable[[ProxyConfiguration], ProxyManager] = proxy_manager_factory,
    make_loader: Callable[..., DatasetLoader] = DatasetLoader,
) -> Session:
    """Create a viewer session mounted on `container`.

    Args:
        container: Identifier of the UI mount target.
        proxy_config: Explicit configuration; wins over any registered default.
        config_registry: Registry holding the active default configuration.
        history: Browser history port (in-memory if omitted).
        location: Page location port read by `process_url_args`.
        settings: Settings store (in-memory if omitted).
        provider: Auxiliary data provider handed to the store.
        readers: Reader registry used for loads and proxy manager readers.
        make_proxy_manager: Factory building the rendering proxy manager.
        make_loader: Factory building the dataset loader.

    Returns:
        The session handle.
    """
    configuration = (config_registry or registry).resolve(proxy_config)
    logger.info(f"Creating session on {container} with '{configuration.name}' proxies")

    proxy_manager = make_proxy_manager(configuration)
    readers.register_readers_to_proxy_manager(proxy_manager)

    settings = settings or SettingsStore()

    store = AppStore(proxy_manager=proxy_manager, provider=provider)
    loader = make_loader(proxy_manager, store, readers=readers)
    app = ViewerApp(container, store, loader)

    history = history if history is not None else InMemoryHistory()
    navigation = NavigationStateMachine(
        history, is_disabled=lambda: bool(settings.get(SETTING_NO_HISTORY))
    )
    navigation.initialize()
    # Always enable history; users must disable it explicitly after start
    settings.set(SETTING_NO_HISTORY, False)
    navigation.bind(store)

    settings.sync_with_store(
        store,
        [
            SyncDirective(
                setting_name=SETTING_COLLAPSE_DATASET_PANELS,
                push=store.collapse_dataset_panels,
                pull=lambda state: state.collapse_dataset_panels,
                mirror=True,
            ),
            SyncDirective(
                setting_name=SETTING_SUPPRESS_BROWSER_WARNING,
                push=store.suppress_browser_warning,
                pull=lambda state: state.suppress_browser_warning,
                mirror=True,
            ),
        ],
    )

    return Session(
        proxy_manager=proxy_manager,
        store=store,
        settings=settings,
        app=app,
        navigation=navigation,
        location=location if location is not None else StaticLocation(),
        loader=loader,
    )
