"""Rendering proxy manager collaborator.

The real rendering subsystem is external; this object keeps the contract the
session layer relies on: it is built from a ProxyConfiguration and it owns
the data sources created from loaded datasets.
"""

import itertools
import logging
import threading
from typing import Any

from glance_session.schemas import ProxyConfiguration

logger = logging.getLogger(__name__)


class ProxyManager:
    """Registry of data sources and the readers that can produce them."""

    def __init__(self, proxy_configuration: ProxyConfiguration) -> None:
        self.proxy_configuration = proxy_configuration
        self._sources: dict[int, dict[str, Any]] = {}
        self._readers: dict[str, str] = {}
        self._ids = itertools.count(1)
        # Sources are created from loader threads
        self._lock = threading.Lock()

    def create_source(self, name: str, dataset: Any, group: str | None = None) -> int:
        """Register a dataset as a new source and return its id."""
        with self._lock:
            source_id = next(self._ids)
            self._sources[source_id] = {"name": name, "dataset": dataset, "group": group}
        logger.info(f"Created source {source_id} ({name})")
        return source_id

    def get_source(self, source_id: int) -> dict[str, Any] | None:
        with self._lock:
            return self._sources.get(source_id)

    def get_sources(self) -> list[dict[str, Any]]:
        with self._lock:
            return [{"id": k, **v} for k, v in self._sources.items()]

    def register_reader(self, extension: str, reader_name: str) -> None:
        with self._lock:
            self._readers[extension.lower()] = reader_name

    def get_reader_name(self, extension: str) -> str | None:
        with self._lock:
            return self._readers.get(extension.lower())

    @property
    def views(self) -> list[str]:
        return list(self.proxy_configuration.views)


def proxy_manager_factory(proxy_configuration: ProxyConfiguration) -> ProxyManager:
    """Default factory handed to sessions."""
    return ProxyManager(proxy_configuration)
