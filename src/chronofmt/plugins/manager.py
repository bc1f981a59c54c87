"""Plugin discovery and loading.

Discovery: entry points in the ``chronofmt.dialects`` group (pip-installed
packages) via pluggy's setuptools entry-point loader, plus plugins
registered directly. Capability: contributing named formatting dialects.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any

import pluggy

from chronofmt.plugins.hookspecs import ChronofmtHookSpec

if TYPE_CHECKING:
    from chronofmt.formatting.contract import Formatter

PROJECT_NAME = "chronofmt"
ENTRY_POINT_GROUP = "chronofmt.dialects"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and dialect collection."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(ChronofmtHookSpec)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Load plugins from the ``chronofmt.dialects`` entry-point group.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay."""
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def collect_dialects(self) -> dict[str, Formatter]:
        """Gather the dialects every registered plugin contributes.

        Broken plugins are logged and skipped; they never stop the others.
        """
        dialects: dict[str, Formatter] = {}
        for plugin in self._pm.get_plugins():
            plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
            hook = getattr(plugin, "register_dialects", None)
            if hook is None:
                continue
            try:
                mapping = hook()
            except Exception:
                logger.warning("Failed to collect dialects from plugin %s", plugin_name, exc_info=True)
                continue
            if mapping is None:
                continue
            if not isinstance(mapping, dict):
                logger.warning("Plugin %s returned non-dict dialect registrations", plugin_name)
                continue
            for dialect_name, formatter in mapping.items():
                instance = self._instantiate(formatter, plugin_name)
                if instance is not None:
                    dialects[str(dialect_name)] = instance
        return dialects

    @staticmethod
    def _instantiate(formatter: Any, plugin_name: str) -> Formatter | None:
        if not inspect.isclass(formatter):
            return formatter
        try:
            return formatter()
        except Exception:
            logger.warning(
                "Failed to instantiate dialect %s from plugin %s",
                formatter.__name__,
                plugin_name,
                exc_info=True,
            )
            return None

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)
