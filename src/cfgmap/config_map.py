"""ConfigMap: a path-addressable tree of configuration values."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from cfgmap.errors import InvalidInsertionError
from cfgmap.utils.path import SEPARATOR, join_path, split_first, split_last
from cfgmap.value import Map, Value

if TYPE_CHECKING:
    from cfgmap.conditions import Condition

__all__ = ["ConfigMap"]

logger = logging.getLogger(__name__)


class ConfigMap:
    """A map from string keys to values, addressable by ``/``-delimited paths.

    ``get("a/b/c")`` is equivalent to descending through the nested maps stored
    at ``a`` and ``a/b``; if any segment before the last is missing or is not a
    ``Map``, the lookup yields None.

    Each map carries a default prefix consulted by ``get_option`` and
    ``update_option`` when a category-specific option is absent. A map built
    with ``ConfigMap()`` falls back to its own root; one built with
    ``ConfigMap.with_default("default")`` falls back to ``default/<option>``.

    Only the methods below are exposed; there is no live view of the backing
    dict, so every read and write goes through path resolution.

    Thread safety:
        Not synchronized. Callers sharing a map across threads must lock
        around every call.
    """

    __slots__ = ("_entries", "_default")

    def __init__(self) -> None:
        self._entries: dict[str, Value] = {}
        self._default: str = ""

    @classmethod
    def with_default(cls, path: str) -> ConfigMap:
        """Create an empty map whose option fallback lives at ``path``.

        Args:
            path: Location of the default subtree. Trailing separators are
                normalized so the stored prefix ends in exactly one.
        """
        cmap = cls()
        cmap._default = path.rstrip(SEPARATOR) + SEPARATOR
        return cmap

    @classmethod
    def from_dict(cls, data: Any, default: str | None = None) -> ConfigMap:
        """Build a map from native Python data. See ``cfgmap.convert.to_config_map``."""
        from cfgmap.convert import to_config_map

        return to_config_map(data, default=default)

    @property
    def default(self) -> str:
        """The default prefix; empty, or ending in exactly one separator."""
        return self._default

    # -- Path-addressed reads --

    def get(self, path: str) -> Value | None:
        """Get the value at ``path``, or None if any segment fails to resolve."""
        head, rest = split_first(path)
        if rest is None:
            return self._entries.get(path)
        node = self._entries.get(head)
        if not isinstance(node, Map):
            return None
        return node.value.get(rest)

    def get_mut(self, path: str) -> Value | None:
        """Get the live value node at ``path`` for in-place mutation.

        Resolution is identical to ``get``. The returned node is the one
        stored in the tree, so assigning to its ``value`` (or mutating a
        nested map or list) changes this map.
        """
        head, rest = split_first(path)
        if rest is None:
            return self._entries.get(path)
        node = self._entries.get(head)
        if not isinstance(node, Map):
            return None
        return node.value.get_mut(rest)

    def contains_key(self, path: str) -> bool:
        """Check whether ``path`` resolves to a value."""
        return self.get(path) is not None

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.contains_key(path)

    def check(self, path: str, condition: Condition) -> bool:
        """Evaluate ``condition`` against the value at ``path``.

        A missing path fails every condition.
        """
        from cfgmap.conditions import check_that

        return check_that(self.get(path), condition)

    # -- Mutation --

    def add(self, path: str, value: Value) -> Value | None:
        """Insert ``value`` at ``path``.

        The final segment is inserted into the map the rest of the path
        resolves to. Intermediate maps are never created.

        Args:
            path: A plain key, or a path whose parent already exists as a map.
            value: The value to store. A copy is stored, so the caller keeps
                no handle into the tree and the same node is never shared
                between paths (or placed inside itself).

        Returns:
            The value previously stored at ``path``, or None.

        Raises:
            InvalidInsertionError: If the parent path is missing or is not a map.
        """
        if not isinstance(value, Value):
            raise TypeError(f"ConfigMap values must be Value instances, got {type(value).__name__}")

        parent_path, key = split_last(path)
        if parent_path is None:
            target = self
        else:
            parent = self.get_mut(parent_path)
            if not isinstance(parent, Map):
                logger.debug("Rejected insertion at '%s': parent '%s' is not a map", path, parent_path)
                raise InvalidInsertionError(path)
            target = parent.value

        # copy before storing: value may hold this map or one of its ancestors
        stored = value.copy()
        previous = target._entries.get(key)
        target._entries[key] = stored
        return previous

    def remove(self, path: str) -> Value | None:
        """Remove and return the value at ``path``, or None if it does not resolve."""
        parent_path, key = split_last(path)
        if parent_path is None:
            return self._entries.pop(key, None)
        parent = self.get_mut(parent_path)
        if not isinstance(parent, Map):
            return None
        return parent.value.remove(key)

    # -- Option resolution --

    def _option_paths(self, category: str, option: str) -> tuple[str, str]:
        return join_path(category, option), f"{self._default}{option}"

    def get_option(self, category: str, option: str) -> Value | None:
        """Get ``category/option``, falling back to the default prefix.

        Category-specific values always take priority. With no default
        prefix configured, the fallback is ``option`` at the root.
        """
        category_path, default_path = self._option_paths(category, option)
        found = self.get(category_path)
        if found is not None:
            return found
        logger.debug("Option '%s' not set for '%s'; trying '%s'", option, category, default_path)
        return self.get(default_path)

    def update_option(self, category: str, option: str, new_value: Value) -> Value | None:
        """Replace an existing option, resolving it the same way as ``get_option``.

        Nothing is inserted: if neither ``category/option`` nor the default
        path exists, the map is left untouched.

        Returns:
            The replaced value, or None if no option was found.
        """
        if not isinstance(new_value, Value):
            raise TypeError(f"ConfigMap values must be Value instances, got {type(new_value).__name__}")

        for path in self._option_paths(category, option):
            if self.get(path) is None:
                continue
            previous = self.add(path, new_value)
            logger.debug("Updated option at '%s'", path)
            return previous
        return None

    # -- Curated map surface --

    def keys(self) -> list[str]:
        """Return a snapshot of the top-level keys."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigMap):
            return NotImplemented
        return self._default == other._default and self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ConfigMap({self._entries!r}, default={self._default!r})"

    def copy(self) -> ConfigMap:
        """Return a deep copy of this map and everything it owns."""
        clone = ConfigMap()
        clone._default = self._default
        clone._entries = {key: value.copy() for key, value in self._entries.items()}
        return clone

    def __copy__(self) -> ConfigMap:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> ConfigMap:
        return self.copy()

    def to_dict(self) -> dict[str, Any]:
        """Return the tree as plain nested Python data.

        The default prefix is not part of the output.
        """
        return {key: value.to_python() for key, value in self._entries.items()}
