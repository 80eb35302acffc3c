"""Process-wide get-or-insert cache.

Backs both the template -> placeholder table cache and the route
source -> template cache. Entries are inserted once and never replaced
or removed.

Free-threading safety:
    Reads take no lock. Inserts go through ``dict.setdefault``, which is
    atomic, so when two threads miss the same key at once both compute,
    the first stored value wins, and both return it. Safe only for
    factories that are pure and deterministic.
"""

import logging
from collections.abc import Callable, Hashable

logger = logging.getLogger("hxkit.routing")


class RouteCache[K: Hashable, V]:
    """Append-only cache with get-or-compute-and-insert semantics.

    Usage::

        cache: RouteCache[str, PlaceholderTable] = RouteCache("templates")
        table = cache.get_or_add("/users/{id}", tokenize)
    """

    __slots__ = ("_data", "name")

    def __init__(self, name: str = "cache") -> None:
        self.name = name
        self._data: dict[K, V] = {}

    def get_or_add(self, key: K, factory: Callable[[K], V]) -> V:
        """Return the cached value for *key*, computing it on a miss.

        Exceptions raised by *factory* propagate and nothing is cached.
        """
        try:
            return self._data[key]
        except KeyError:
            pass
        value = factory(key)
        logger.debug("%s cache miss: %r", self.name, key)
        return self._data.setdefault(key, value)

    def get(self, key: K) -> V | None:
        """Return the cached value for *key* without computing it."""
        return self._data.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"RouteCache({self.name!r}, entries={len(self._data)})"
