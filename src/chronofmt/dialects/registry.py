"""Built-in dialects and the registry of named custom dialects.

Custom dialects are registered explicitly with :func:`register_dialect` or
contributed by entry-point plugins. Plugin discovery runs once, on the
first lookup of a name that is not registered, and only when
``[plugins] enabled`` is true.

INVARIANT: built-in dialect names are reserved and cannot be registered.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from chronofmt.dialects.default import DefaultFormatter
from chronofmt.dialects.relative import RelativeFormatter
from chronofmt.dialects.strftime import StrftimeFormatter
from chronofmt.domain.types import DialectName

if TYPE_CHECKING:
    from chronofmt.formatting.contract import Formatter
    from chronofmt.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

BUILTIN_DIALECTS: dict[DialectName, Formatter] = {
    DialectName.DEFAULT: DefaultFormatter(),
    DialectName.STRFTIME: StrftimeFormatter(),
    DialectName.RELATIVE: RelativeFormatter(),
}

RESERVED_NAMES: frozenset[str] = frozenset(d.value for d in DialectName)

_lock = threading.Lock()
_discovery_lock = threading.Lock()
_custom: dict[str, Formatter] = {}
_plugins_loaded = False


def builtin_dialect(name: DialectName) -> Formatter:
    return BUILTIN_DIALECTS[name]


def register_dialect(name: str, formatter: Formatter, *, overwrite: bool = False) -> None:
    """Register *formatter* under *name*.

    Raises ValueError for reserved names, or when *name* is taken and
    *overwrite* is False.
    """
    if name in RESERVED_NAMES:
        raise ValueError(f"Dialect name {name!r} is reserved for a built-in dialect")
    with _lock:
        if name in _custom and not overwrite:
            raise ValueError(f"Dialect {name!r} is already registered")
        _custom[name] = formatter
    logger.debug("Registered dialect %s: %r", name, formatter)


def unregister_dialect(name: str) -> None:
    """Remove a custom dialect; unknown names are ignored."""
    with _lock:
        _custom.pop(name, None)


def load_plugin_dialects(manager: PluginManager | None = None) -> list[str]:
    """Register the dialects contributed by entry-point plugins.

    Names already registered explicitly win over plugin contributions.
    Returns the names that were added.
    """
    from chronofmt.plugins.manager import PluginManager

    global _plugins_loaded
    pm = manager or PluginManager()
    if not pm.is_loaded:
        pm.discover_and_load()
    added: list[str] = []
    for name, formatter in pm.collect_dialects().items():
        with _lock:
            if name in _custom or name in RESERVED_NAMES:
                logger.warning("Ignoring plugin dialect %r: name already in use", name)
                continue
            _custom[name] = formatter
        added.append(name)
    _plugins_loaded = True
    return added


def ensure_plugin_dialects() -> None:
    """Run plugin discovery once, if plugins are enabled in settings."""
    from chronofmt.config.settings import get_settings

    if _plugins_loaded or not get_settings().plugins.enabled:
        return
    with _discovery_lock:
        if not _plugins_loaded:
            load_plugin_dialects()


def lookup_dialect(name: str) -> Formatter | None:
    """Return the custom dialect registered as *name*, or None."""
    formatter = _custom.get(name)
    if formatter is None and not _plugins_loaded:
        ensure_plugin_dialects()
        formatter = _custom.get(name)
    return formatter


def list_dialects() -> list[str]:
    """Names of all available dialects, built-ins first."""
    with _lock:
        custom = sorted(_custom)
    return [d.value for d in DialectName] + custom


def reset_registry() -> None:
    """Forget custom dialects and allow plugin discovery to run again."""
    global _plugins_loaded
    with _lock:
        _custom.clear()
        _plugins_loaded = False
