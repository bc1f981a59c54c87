"""Built-in formatting dialects and the custom dialect registry."""

from chronofmt.dialects.default import DefaultFormatter
from chronofmt.dialects.registry import (
    ensure_plugin_dialects,
    list_dialects,
    load_plugin_dialects,
    lookup_dialect,
    register_dialect,
    unregister_dialect,
)
from chronofmt.dialects.relative import RelativeFormatter
from chronofmt.dialects.strftime import StrftimeFormatter

__all__ = [
    "DefaultFormatter",
    "RelativeFormatter",
    "StrftimeFormatter",
    "ensure_plugin_dialects",
    "list_dialects",
    "load_plugin_dialects",
    "lookup_dialect",
    "register_dialect",
    "unregister_dialect",
]
