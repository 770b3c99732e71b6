"""
Test-only forum application initialization.
"""

from django.apps import AppConfig


class ForumConfig(AppConfig):
    """
    Stands in for the host forum that installs the prefixes app.
    """

    name = "test_utils.forum"
    verbose_name = "Test Forum"
    default_auto_field = "django.db.models.BigAutoField"
    label = "forum"
