"""PathResolver: LRU-backed path lookup over one Value tree.

Wraps ``find_path`` and caches resolved nodes by path.  A lookup first tries
to resume from the longest cached proper prefix of the path (split at a
``.`` or ``[`` boundary), so resolving paths in enumeration order costs one
step per path instead of one walk from the root.  When no cached prefix leads
to a node, resolution falls back to a full walk from the root.

Each ``PathResolver`` owns its ``LRUCache``; there is no shared state between
instances, and eviction is silent.

Example::

    resolver = PathResolver(parse('{"a": {"b": [1, 2]}}'))
    resolver.resolve("a.b[1]")   # JsonNumber(2)
    resolver.find("a.c")         # None
"""

from __future__ import annotations

from cachetools import LRUCache

from json_profiler.analysis.paths import find_path, resume_path
from json_profiler.errors import PathNotFoundError
from json_profiler.tree.nodes import Value

__all__ = ["PathResolver"]


class PathResolver:
    """Cached path-addressed lookup into a single tree.

    Args:
        root: The tree to resolve paths against.
        max_cache_size: Maximum number of resolved nodes held in memory.
            Defaults to 1024.
    """

    def __init__(self, root: Value, max_cache_size: int = 1024) -> None:
        self._root = root
        self._cache: LRUCache[str, Value] = LRUCache(maxsize=max_cache_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def root(self) -> Value:
        return self._root

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find(self, path: str) -> Value | None:
        """Return the node at ``path``, or None when the path does not resolve."""
        if not path:
            return self._root

        cached = self._cache.get(path)
        if cached is not None:
            return cached

        found = self._resume_from_prefix(path)
        if found is None:
            found = find_path(self._root, path)
        if found is not None:
            self._cache[path] = found
        return found

    def resolve(self, path: str) -> Value:
        """Return the node at ``path``.

        Raises:
            PathNotFoundError: The path does not address a node of the tree.
        """
        found = self.find(path)
        if found is None:
            raise PathNotFoundError(path)
        return found

    def _resume_from_prefix(self, path: str) -> Value | None:
        boundary = len(path)
        while True:
            boundary = max(path.rfind(".", 0, boundary), path.rfind("[", 0, boundary))
            if boundary <= 0:
                return None
            prefix_node = self._cache.get(path[:boundary])
            if prefix_node is None:
                continue
            found = resume_path(prefix_node, path[boundary:], at_root=False)
            if found is not None:
                return found
