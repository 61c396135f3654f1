"""Schemas package.

- config.py: Proxy configuration model and the built-in fallback
- data.py: Session state models (Route, HistoryEntry, AppState, etc.)
- defaults.py: Setting keys, URL parameter names and default values
"""

from .config import BUILTIN_PROXY_CONFIGURATION, ProxyConfiguration
from .data import (
    AppState,
    DatasetRecord,
    HistoryEntry,
    LoadBatch,
    LoadRequest,
    PanelDescriptor,
    Route,
    RouteChange,
)

__all__ = [
    "ProxyConfiguration",
    "BUILTIN_PROXY_CONFIGURATION",
    "Route",
    "RouteChange",
    "HistoryEntry",
    "PanelDescriptor",
    "LoadRequest",
    "LoadBatch",
    "DatasetRecord",
    "AppState",
]
