"""Services package for session orchestration.

This package contains:
- proxy_config.py: Proxy configuration precedence and the active registry
- settings.py: Persisted settings and store synchronization
- navigation.py: History-based landing/app navigation
- url_args.py: Page-load URL parameter processing
- readers.py: Dataset reader registry
- loader.py: Fire-and-forget remote dataset loading
- proxy_manager.py: Rendering proxy manager collaborator
- ports.py: Browser/host protocols
"""

from glance_session.services.navigation import NavigationStateMachine
from glance_session.services.proxy_config import ProxyConfigRegistry, resolve
from glance_session.services.settings import UNSET, SettingsStore, SyncDirective

__all__ = [
    "NavigationStateMachine",
    "ProxyConfigRegistry",
    "resolve",
    "SettingsStore",
    "SyncDirective",
    "UNSET",
]
