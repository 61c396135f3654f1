"""Persisted user settings and their synchronization into the app store.

Settings are named user preferences stored independently of the transient
view-state held by the application store. Every `set` is written through to
the backing JSON file immediately.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping

from glance_session.schemas.defaults import DEFAULT_SETTINGS

logger = logging.getLogger(__name__)

SETTINGS_PATH = Path.cwd() / "settings" / "settings.json"


class _Unset:
    """Sentinel returned for settings that have neither a value nor a default."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()


class SettingsStorage:
    """JSON file backend. With no path, values only live in memory."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = Path(path) if path is not None else None

    def load(self) -> dict:
        if self.path is None or not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring unreadable settings file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, values: dict) -> None:
        """Write `values` atomically; the old file survives a failed dump."""
        if self.path is None:
            return
        # Serialize first so a bad value never truncates the file
        payload = json.dumps(values, indent=2, sort_keys=True)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(payload)
        tmp_path.replace(self.path)


@dataclass(frozen=True)
class SyncDirective:
    """Binds one setting to a slice of the external store.

    push: called with the setting value to seed the store.
    pull: reads the setting's value back out of a store state.
    mirror: stay bound both ways after seeding.
    """

    setting_name: str
    push: Callable[[Any], None]
    pull: Callable[[Any], Any]
    mirror: bool = False


class SettingsStore:
    """Named key-value store with defaults, persisted on every write."""

    def __init__(
        self,
        storage: SettingsStorage | None = None,
        defaults: Mapping[str, Any] | None = None,
    ) -> None:
        self.storage = storage or SettingsStorage()
        self.defaults = dict(DEFAULT_SETTINGS if defaults is None else defaults)
        self._values = self.storage.load()
        self._directives: list[SyncDirective] = []
        self._unsubscribers: list[Callable[[], None]] = []

    def get(self, name: str) -> Any:
        """Return the persisted value, else the default, else UNSET."""
        if name in self._values:
            return self._values[name]
        return self.defaults.get(name, UNSET)

    def set(self, name: str, value: Any) -> None:
        """Persist `value`, then push it to any mirrored store binding.

        Raises:
            TypeError: If the value cannot be serialized; nothing is kept.
        """
        had_value = name in self._values
        previous = self._values.get(name)
        self._values[name] = value
        try:
            self.storage.save(self._values)
        except (TypeError, ValueError, OSError):
            if had_value:
                self._values[name] = previous
            else:
                del self._values[name]
            raise
        logger.debug(f"Setting {name}={value!r}")

        for directive in self._directives:
            if directive.mirror and directive.setting_name == name:
                directive.push(value)

    def sync_with_store(
        self,
        store,
        bindings: "list[SyncDirective] | Mapping[str, Mapping[str, Callable]]",
    ) -> None:
        """Seed `store` from settings, one directive at a time.

        `bindings` is either a list of SyncDirective or the mapping form
        `{name: {"set": push, "get": pull}}`. Seeding is one-shot; only
        directives with `mirror=True` stay bound both ways afterwards: a
        `set` pushes to the store, and a store commit that changes the
        pulled slice is written back.
        """
        directives = self._as_directives(bindings)
        for directive in directives:
            directive.push(self.get(directive.setting_name))
            self._directives.append(directive)
            if directive.mirror:
                self._unsubscribers.append(
                    store.subscribe_change(self._mirror_listener(directive))
                )

    def pull_from_store(self, state) -> None:
        """Copy every bound value out of `state` into settings."""
        for directive in self._directives:
            value = directive.pull(state)
            if value != self.get(directive.setting_name):
                self.set(directive.setting_name, value)

    def unbind(self) -> None:
        """Drop all sync directives and store subscriptions."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        self._directives = []

    def _mirror_listener(self, directive: SyncDirective):
        def on_change(state, old_state) -> None:
            value = directive.pull(state)
            if value == directive.pull(old_state):
                return
            if value != self.get(directive.setting_name):
                self.set(directive.setting_name, value)

        return on_change

    @staticmethod
    def _as_directives(bindings) -> list[SyncDirective]:
        if isinstance(bindings, Mapping):
            return [
                SyncDirective(setting_name=name, push=adapter["set"], pull=adapter["get"])
                for name, adapter in bindings.items()
            ]
        return list(bindings)
