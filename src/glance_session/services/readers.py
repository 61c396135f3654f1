"""Dataset reader registry.

Maps file extensions to reader callables. Parsing itself is delegated: the
default readers hand tabular formats to pandas.
"""

import base64
import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

import pandas as pd

logger = logging.getLogger(__name__)

ReadFn = Callable[[bytes], Any]


class UnsupportedFormatError(KeyError):
    """Raised when no reader is registered for a file's extension."""


@dataclass(frozen=True)
class ReaderSpec:
    """A registered reader."""

    name: str
    read: ReadFn
    binary: bool = False


def extension_of(filename: str) -> str:
    """Lower-case extension without the dot ('' if none)."""
    return Path(filename.split("?", 1)[0]).suffix.lstrip(".").lower()


class ReaderFactory:
    def __init__(self) -> None:
        self._readers: dict[str, ReaderSpec] = {}

    def register_reader(
        self, extension: str, name: str, read: ReadFn, binary: bool = False
    ) -> ReaderSpec:
        """Register `read` for `extension`, replacing any previous reader."""
        spec = ReaderSpec(name=name, read=read, binary=binary)
        self._readers[extension.lstrip(".").lower()] = spec
        return spec

    def get_reader(self, filename: str) -> ReaderSpec | None:
        return self._readers.get(extension_of(filename))

    def list_readers(self) -> list[dict[str, Any]]:
        """One entry per reader name, with every extension it handles."""
        readers: dict[str, dict[str, Any]] = {}
        for ext, spec in sorted(self._readers.items()):
            entry = readers.setdefault(
                spec.name, {"name": spec.name, "extensions": [], "binary": spec.binary}
            )
            entry["extensions"].append(ext)
        return list(readers.values())

    def list_supported_extensions(self) -> list[str]:
        return sorted(self._readers)

    def read(self, filename: str, payload: bytes) -> Any:
        """Parse `payload` with the reader registered for `filename`.

        Raises:
            UnsupportedFormatError: If no reader handles the extension.
        """
        spec = self.get_reader(filename)
        if spec is None:
            raise UnsupportedFormatError(f"No reader for {filename!r}")
        return spec.read(payload)

    def load_files(self, paths) -> list[tuple[str, Any]]:
        """Read local files; returns (name, dataset) pairs in input order."""
        results = []
        for path in paths:
            path = Path(path)
            results.append((path.name, self.read(path.name, path.read_bytes())))
        return results

    def import_base64_dataset(
        self, filename: str, content: str, proxy_manager=None
    ) -> Any:
        """Decode a base64 payload and read it; optionally register a source."""
        dataset = self.read(filename, base64.b64decode(content))
        if proxy_manager is not None:
            proxy_manager.create_source(filename, dataset)
        return dataset

    def register_readers_to_proxy_manager(self, proxy_manager) -> None:
        for ext, spec in self._readers.items():
            proxy_manager.register_reader(ext, spec.name)


def _read_csv(payload: bytes) -> pd.DataFrame:
    return pd.read_csv(io.BytesIO(payload))


def _read_tsv(payload: bytes) -> pd.DataFrame:
    return pd.read_csv(io.BytesIO(payload), sep="\t")


def _read_json(payload: bytes) -> pd.DataFrame:
    return pd.read_json(io.BytesIO(payload))


def create_default_factory() -> ReaderFactory:
    factory = ReaderFactory()
    factory.register_reader("csv", "CSVReader", _read_csv)
    factory.register_reader("tsv", "TSVReader", _read_tsv)
    factory.register_reader("json", "JSONReader", _read_json)
    return factory


# Singleton instance
reader_factory = create_default_factory()

get_reader = reader_factory.get_reader
import_base64_dataset = reader_factory.import_base64_dataset
list_readers = reader_factory.list_readers
list_supported_extensions = reader_factory.list_supported_extensions
load_files = reader_factory.load_files
register_reader = reader_factory.register_reader
register_readers_to_proxy_manager = reader_factory.register_readers_to_proxy_manager
