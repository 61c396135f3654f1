"""Shared test fixtures."""

from typing import Callable

import pytest

from glance_session.infrastructure.history import InMemoryHistory, StaticLocation
from glance_session.schemas import PanelDescriptor, ProxyConfiguration
from glance_session.services.proxy_config import ProxyConfigRegistry
from glance_session.services.settings import SettingsStore
from glance_session.session import Session, create_session
from glance_session.vis.state.store import AppStore

from factories import RecordingLoader, create_panel, create_proxy_configuration


@pytest.fixture
def proxy_config_factory() -> Callable[..., ProxyConfiguration]:
    """Fixture that returns the proxy configuration factory function."""
    return create_proxy_configuration


@pytest.fixture
def panel_factory() -> Callable[..., PanelDescriptor]:
    """Fixture that returns the panel descriptor factory function."""
    return create_panel


@pytest.fixture
def history() -> InMemoryHistory:
    return InMemoryHistory()


@pytest.fixture
def location() -> StaticLocation:
    return StaticLocation()


@pytest.fixture
def settings() -> SettingsStore:
    """Return an in-memory settings store."""
    return SettingsStore()


@pytest.fixture
def config_registry() -> ProxyConfigRegistry:
    """Return a registry isolated from the process-wide one."""
    return ProxyConfigRegistry()


@pytest.fixture
def store() -> AppStore:
    return AppStore()


@pytest.fixture
def session(history, location, settings, config_registry) -> Session:
    """Return a session wired to in-memory collaborators and a recording loader."""
    return create_session(
        "test-root",
        config_registry=config_registry,
        history=history,
        location=location,
        settings=settings,
        make_loader=RecordingLoader,
    )
