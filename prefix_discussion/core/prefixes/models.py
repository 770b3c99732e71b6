"""
Prefixes app data models
"""
from __future__ import annotations

from django.db import models
from django.utils.translation import gettext_lazy as _

from prefix_discussion.lib.fields import prefix_field


class Setting(models.Model):
    """
    A single entry of the prefixes configuration store.

    Administrators edit these at runtime (through the admin or the REST API),
    so they can't live in Django settings. Values are stored as JSON so that
    flags stay booleans and strings stay strings.
    """

    id = models.BigAutoField(primary_key=True)
    key = models.CharField(
        max_length=255,
        unique=True,
        help_text=_("Name of the configuration entry, e.g. 'prefixes'."),
    )
    value = models.JSONField(
        null=True,
        blank=True,
        help_text=_("Current value of the configuration entry."),
    )
    updated = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Prefix Discussion setting")
        verbose_name_plural = _("Prefix Discussion settings")

    def __str__(self):
        """
        User-facing string representation of a Setting.
        """
        return f"{self.key}={self.value!r}"


class PrefixedDiscussionMixin(models.Model):
    """
    Abstract mixin that the host's discussion model inherits to get a prefix.

    The column is nullable and NULL means "no prefix". Code that writes to it
    should go through the prefixes API, which only ever stores a configured
    label or NULL.
    """

    prefix = prefix_field()

    class Meta:
        abstract = True
