"""
Test-friendly helpers for caching.

Some of our derived data (like the list of configured prefixes) is cheap to
compute but read on almost every page, so we compute it once per process and
keep it for the lifetime of that process. We never invalidate these caches
while serving requests, but we do want to be able to reset them across test
runs, so every cache created here is tracked in a module-level list.
"""
from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")

_NOT_COMPUTED = object()

# List of caches that have been created with ProcessCache
_process_caches: list[ProcessCache] = []


class ProcessCache(Generic[T]):
    """
    Holds a single lazily-computed value for the lifetime of the process.

    Concurrent first calls may both run ``compute``; as long as ``compute`` is
    deterministic for a given configuration, the value stored is the same.
    """

    def __init__(self, compute: Callable[[], T]) -> None:
        self._compute = compute
        self._value: object = _NOT_COMPUTED
        _process_caches.append(self)

    def get(self) -> T:
        """
        Return the cached value, computing it on first access.
        """
        if self._value is _NOT_COMPUTED:
            self._value = self._compute()
        return self._value  # type: ignore[return-value]

    @property
    def is_populated(self) -> bool:
        return self._value is not _NOT_COMPUTED

    def clear(self) -> None:
        self._value = _NOT_COMPUTED


def clear_process_caches() -> None:
    """
    Clear all caches that were created with ProcessCache.

    Useful for tests.
    """
    for cache in _process_caches:
        cache.clear()
