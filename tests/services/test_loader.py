"""Unit tests for fire-and-forget remote loading."""

from unittest.mock import MagicMock, patch

import pytest
import requests

import glance_session.services.loader as loader_module
from glance_session.schemas import LoadRequest
from glance_session.services.loader import DatasetLoader
from glance_session.services.proxy_manager import ProxyManager
from glance_session.services.readers import create_default_factory


@pytest.fixture
def manager(proxy_config_factory) -> ProxyManager:
    return ProxyManager(proxy_config_factory())


def _fetch(url: str) -> bytes:
    if "missing" in url:
        raise requests.HTTPError("404 Client Error")
    return b"x,y\n1,2\n"


def test_batch_loads_into_manager_and_store(manager, store) -> None:
    loader = DatasetLoader(manager, store, readers=create_default_factory(), fetch=_fetch)
    future = loader.load_remotes(
        "resources from url",
        [
            LoadRequest(name="a.csv", url="https://host/a"),
            LoadRequest(name="b", url="https://host/b.csv"),
        ],
    )
    records = future.result(timeout=5)
    loader.shutdown()

    assert [r.status for r in records] == ["loaded", "loaded"]
    assert [s["name"] for s in manager.get_sources()] == ["a.csv", "b"]
    assert [r.name for r in store.state.value.datasets] == ["a.csv", "b"]
    assert all(r.group == "resources from url" for r in store.state.value.datasets)


def test_failures_are_recorded_not_raised(manager, store) -> None:
    loader = DatasetLoader(manager, store, readers=create_default_factory(), fetch=_fetch)
    records = loader.load_remotes(
        "resources from url",
        [
            LoadRequest(name="gone.csv", url="https://host/missing"),
            LoadRequest(name="mesh.vtp", url="https://host/mesh.vtp"),
            LoadRequest(name="ok.csv", url="https://host/ok"),
        ],
    ).result(timeout=5)
    loader.shutdown()

    assert [r.status for r in records] == ["failed", "failed", "loaded"]
    assert "404" in records[0].error
    assert len(manager.get_sources()) == 1


def test_fetch_bytes_uses_requests() -> None:
    response = MagicMock()
    response.content = b"payload"
    with patch.object(loader_module.requests, "get", return_value=response) as get:
        assert loader_module.fetch_bytes("https://host/x", timeout=3) == b"payload"
    get.assert_called_once_with("https://host/x", timeout=3)
    response.raise_for_status.assert_called_once()
