"""Named configuration entries shared by every task of a run.

Entries are plain mappings addressed by name. Dotted names reach into
nested mappings, so ``pkg.meta`` is ``store["pkg"]["meta"]``.
"""

import copy
from collections.abc import Mapping
from typing import Any


class ConfigStore:
    """Mutable in-memory configuration entries."""

    def __init__(self, entries: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(dict(entries or {}))

    def get(self, name: str) -> Any:
        """Return the entry called name, or None if it does not exist."""
        node: Any = self._data
        for part in name.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node

    def set(self, name: str, value: Any) -> None:
        """Store value under name, creating intermediate mappings."""
        parts = name.split(".")
        node = self._data
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = value

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def as_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)
