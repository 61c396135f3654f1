"""Proxy configuration resolution.

Precedence (decreasing order):
    explicit session argument, registered active configuration, built-in config
"""

import logging

from glance_session.schemas import BUILTIN_PROXY_CONFIGURATION, ProxyConfiguration

logger = logging.getLogger(__name__)


def resolve(
    explicit: ProxyConfiguration | None,
    active_default: ProxyConfiguration | None,
    builtin_default: ProxyConfiguration | None,
) -> ProxyConfiguration | None:
    """Return the first configuration that is not None."""
    for candidate in (explicit, active_default, builtin_default):
        if candidate is not None:
            return candidate
    return None


class ProxyConfigRegistry:
    """Holds the active default configuration consulted by `resolve`.

    The active value is never consumed: it stays in place for every
    subsequent resolution until overwritten.
    """

    def __init__(
        self, builtin: ProxyConfiguration = BUILTIN_PROXY_CONFIGURATION
    ) -> None:
        self.builtin = builtin
        self.active: ProxyConfiguration | None = None

    def set_active(self, config: ProxyConfiguration | None) -> None:
        """Register (or clear, with None) the active default configuration."""
        self.active = config
        logger.debug(
            "Active proxy configuration set to %s",
            config.name if config is not None else None,
        )

    def resolve(self, explicit: ProxyConfiguration | None = None) -> ProxyConfiguration:
        return resolve(explicit, self.active, self.builtin)


# Process-wide registry used when a session is not given its own
registry = ProxyConfigRegistry()


def set_active_proxy_configuration(
    config: ProxyConfiguration | None, target: ProxyConfigRegistry | None = None
) -> None:
    """Register the default configuration used by subsequent sessions."""
    (target or registry).set_active(config)
