"""Session bootstrap and runtime orchestration for the Glance viewer."""

from glance_session.services.proxy_config import set_active_proxy_configuration
from glance_session.services.readers import (
    get_reader,
    import_base64_dataset,
    list_readers,
    list_supported_extensions,
    load_files,
    register_reader,
    register_readers_to_proxy_manager,
)
from glance_session.session import Session, create_session

__all__ = [
    "Session",
    "create_session",
    "set_active_proxy_configuration",
    "get_reader",
    "import_base64_dataset",
    "list_readers",
    "list_supported_extensions",
    "load_files",
    "register_reader",
    "register_readers_to_proxy_manager",
]
