"""
The prefix catalog: the currently valid prefixes, computed once per process.
"""
from __future__ import annotations

from typing import Callable

from prefix_discussion.lib.cache import ProcessCache

from .data import PrefixSet


class PrefixCatalog:
    """
    Owns the per-process cache of the configured PrefixSet.

    The catalog is created once by the app config and lives as long as the
    process. It doesn't watch the configuration store: a process that has
    already loaded the prefixes keeps them until it restarts (or until
    ``clear()`` is called, which only tests should do).
    """

    def __init__(self, load: Callable[[], PrefixSet]) -> None:
        self._cache: ProcessCache[PrefixSet] = ProcessCache(load)

    def get_prefixes(self) -> PrefixSet:
        return self._cache.get()

    def clear(self) -> None:
        self._cache.clear()
