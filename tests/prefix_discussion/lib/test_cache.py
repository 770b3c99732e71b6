"""
Tests for the process-level cache helpers
"""
from unittest import mock

from django.test import SimpleTestCase

from prefix_discussion.lib import cache as cache_module
from prefix_discussion.lib.cache import ProcessCache, clear_process_caches


class ProcessCacheTestCase(SimpleTestCase):
    """
    Test ProcessCache.
    """

    def make_cache(self, compute) -> ProcessCache:
        """
        Create a ProcessCache that is unregistered again after the test.
        """
        cache = ProcessCache(compute)
        self.addCleanup(cache_module._process_caches.remove, cache)  # pylint: disable=protected-access
        return cache

    def test_computes_once(self):
        compute = mock.Mock(return_value=["Question"])
        cache = self.make_cache(compute)
        assert not cache.is_populated
        first = cache.get()
        assert cache.get() is first
        assert cache.is_populated
        compute.assert_called_once_with()

    def test_caches_falsy_values(self):
        compute = mock.Mock(return_value=None)
        cache = self.make_cache(compute)
        assert cache.get() is None
        assert cache.get() is None
        compute.assert_called_once_with()

    def test_clear(self):
        compute = mock.Mock(side_effect=[1, 2])
        cache = self.make_cache(compute)
        assert cache.get() == 1
        cache.clear()
        assert cache.get() == 2

    def test_clear_process_caches(self):
        caches = [self.make_cache(mock.Mock(return_value=n)) for n in range(3)]
        for cache in caches:
            cache.get()
        clear_process_caches()
        assert not any(cache.is_populated for cache in caches)

    def test_caches_are_registered(self):
        registered = len(cache_module._process_caches)  # pylint: disable=protected-access
        cache = self.make_cache(mock.Mock())
        assert cache in cache_module._process_caches  # pylint: disable=protected-access
        assert len(cache_module._process_caches) == registered + 1  # pylint: disable=protected-access
