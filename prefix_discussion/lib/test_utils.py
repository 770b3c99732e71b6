"""
Test utilities for Prefix Discussion.

The only thing here now is a TestCase class that knows how to clean up the
process-level caching used by the cache module in this package.
"""
import django.test

from .cache import clear_process_caches


class TestCase(django.test.TestCase):
    """
    Subclass of Django's TestCase that knows how to reset caching we might use.
    """
    def setUp(self) -> None:
        clear_process_caches()
        super().setUp()

    def tearDown(self) -> None:
        clear_process_caches()
        super().tearDown()
