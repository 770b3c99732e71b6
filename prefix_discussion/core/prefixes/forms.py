"""
Form fields for choosing a discussion prefix.
"""
from __future__ import annotations

from django import forms
from django.utils.translation import gettext_lazy as _

from . import api
from .data import PrefixSet


class PrefixChoiceField(forms.ChoiceField):
    """
    Select box of the configured prefixes, preceded by a "no prefix" entry.

    Unlike a regular ChoiceField, an unknown value is not a validation error:
    it cleans to None, the same as choosing "no prefix".
    """

    def __init__(self, *, prefixes: PrefixSet | None = None, **kwargs):
        self.prefixes = prefixes
        kwargs.setdefault("required", False)
        kwargs.setdefault("label", _("Discussion Prefix"))
        # A callable defers reading the catalog until the field is rendered.
        super().__init__(choices=self._get_choices, **kwargs)

    def _get_choices(self):
        return self._get_prefixes().as_choices(include_none=True)

    def _get_prefixes(self) -> PrefixSet:
        if self.prefixes is None:
            return api.get_prefixes()
        return self.prefixes

    def validate(self, value):
        """
        Accept anything; clean() maps unknown values to None.
        """

    def clean(self, value):
        value = super().clean(value)
        return api.normalize_assignment(value, self._get_prefixes())


class DiscussionPrefixForm(forms.Form):
    """
    Stand-alone form with just the prefix, for hosts whose forms lack the field.
    """

    prefix = PrefixChoiceField()
