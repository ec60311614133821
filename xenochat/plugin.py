"""Plugin lifecycle tracking."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Plugin(ABC):
    """An extension with load and unload hooks; hooks raise on failure."""

    @abstractmethod
    def id(self) -> str:
        """Unique plugin identifier."""

    @abstractmethod
    def version(self) -> str:
        """Plugin version string."""

    @abstractmethod
    def on_load(self) -> None:
        """Prepare the plugin; raise to refuse loading."""

    @abstractmethod
    def on_unload(self) -> None:
        """Release the plugin; raise to refuse unloading."""


class PluginRegistry:
    """Records which plugins are enabled."""

    def __init__(self) -> None:
        self._states: dict[str, bool] = {}

    def register(self, plugin: Plugin) -> None:
        """Load the plugin and mark it enabled; errors from on_load propagate."""
        plugin.on_load()
        self._states[plugin.id()] = True

    def disable(self, plugin: Plugin) -> None:
        """Unload the plugin and mark it disabled; errors from on_unload propagate."""
        plugin.on_unload()
        self._states[plugin.id()] = False

    def is_enabled(self, plugin_id: str) -> bool:
        """Whether the plugin is known and enabled."""
        return self._states.get(plugin_id, False)

    def enabled_count(self) -> int:
        """Number of enabled plugins."""
        return sum(self._states.values())