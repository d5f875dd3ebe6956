"""Plugin identifiers shared with the settings layer."""

from typing import NewType

PluginName = NewType("PluginName", str)

# Per-plugin alias table: plugin -> {alias: version}. Insertion order is kept.
AliasMap = dict[PluginName, dict[str, str]]
