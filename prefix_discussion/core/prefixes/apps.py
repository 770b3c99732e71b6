"""
prefixes Django application initialization.
"""

from django.apps import AppConfig


class PrefixesConfig(AppConfig):
    """
    Configuration for the prefixes Django application.
    """

    name = "prefix_discussion.core.prefixes"
    verbose_name = "Prefix Discussion"
    default_auto_field = "django.db.models.BigAutoField"
    label = "prefix_discussion"

    def ready(self):
        # pylint: disable=import-outside-toplevel,unused-import
        from . import handlers  # connects the signal receivers
        from .api import load_prefix_set
        from .catalog import PrefixCatalog

        self.catalog = PrefixCatalog(load_prefix_set)
