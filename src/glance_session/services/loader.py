"""Remote dataset loading.

Batches are fire-and-forget: `load_remotes` hands the work to a thread pool
and returns immediately. Each request is fetched, parsed by the reader
registry, registered as a proxy manager source and recorded in the store.
Failures are logged and recorded, never raised to the caller.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable

import requests

from glance_session.schemas import DatasetRecord, LoadRequest
from glance_session.schemas.defaults import (
    DEFAULT_FETCH_TIMEOUT,
    DEFAULT_LOADER_WORKERS,
)
from glance_session.services.readers import ReaderFactory, reader_factory

logger = logging.getLogger(__name__)


def fetch_bytes(url: str, timeout: float = DEFAULT_FETCH_TIMEOUT) -> bytes:
    """Download `url` and return the response body."""
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    return resp.content


class DatasetLoader:
    """Loads remote datasets into the proxy manager and the store."""

    def __init__(
        self,
        proxy_manager,
        store,
        readers: ReaderFactory = reader_factory,
        fetch: Callable[[str], bytes] = fetch_bytes,
        executor: ThreadPoolExecutor | None = None,
    ) -> None:
        self.proxy_manager = proxy_manager
        self.store = store
        self.readers = readers
        self.fetch = fetch
        self.executor = executor or ThreadPoolExecutor(
            max_workers=DEFAULT_LOADER_WORKERS, thread_name_prefix="dataset-loader"
        )

    def load_remotes(self, group: str, load_requests: list[LoadRequest]) -> Future:
        """Schedule one batch; the returned future is for callers that care."""
        logger.info(f"Loading {len(load_requests)} dataset(s) for '{group}'")
        return self.executor.submit(self._load_batch, group, list(load_requests))

    def load_one(self, group: str, request: LoadRequest) -> DatasetRecord:
        """Fetch, read and register a single dataset."""
        try:
            payload = self.fetch(request.url)
            filename = request.name if self.readers.get_reader(request.name) else request.url
            dataset = self.readers.read(filename, payload)
            source_id = self.proxy_manager.create_source(request.name, dataset, group)
        except Exception as e:
            logger.error(f"Failed to load {request.name} from {request.url}: {e}")
            record = DatasetRecord(
                name=request.name,
                url=request.url,
                group=group,
                status="failed",
                error=str(e),
            )
        else:
            record = DatasetRecord(
                name=request.name, url=request.url, group=group, source_id=source_id
            )
        self.store.add_dataset(record)
        return record

    def shutdown(self) -> None:
        self.executor.shutdown(wait=False)

    def _load_batch(
        self, group: str, load_requests: list[LoadRequest]
    ) -> list[DatasetRecord]:
        return [self.load_one(group, request) for request in load_requests]
