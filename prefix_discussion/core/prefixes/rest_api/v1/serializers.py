"""
API Serializers for discussion prefixes
"""
from __future__ import annotations

from django.utils.translation import gettext as _
from rest_framework import serializers

from prefix_discussion.lib.fields import PREFIX_MAX_LENGTH

from ... import api


class PrefixListSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """
    Serializer for the currently valid prefixes, in display order
    """
    prefixes = serializers.ListField(child=serializers.CharField())


class PrefixSettingsSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """
    Serializer for the administrator-editable prefix settings

    Whitespace is kept as-is: a space is a legitimate separator, and the
    labels get trimmed when the list is parsed anyway.
    """
    prefixes = serializers.CharField(allow_blank=True, trim_whitespace=False)
    list_separator = serializers.CharField(max_length=16, trim_whitespace=False)

    def validate(self, attrs):
        """
        Reject prefix lists containing a label too long for the prefix column.

        On a partial update the missing value is taken from the store, since a
        new separator can split the stored list differently.
        """
        current = api.get_prefix_settings()
        prefixes = attrs.get(api.PREFIXES, current[api.PREFIXES])
        separator = attrs.get(api.LIST_SEPARATOR, current[api.LIST_SEPARATOR])
        if isinstance(prefixes, str):
            labels = prefixes.split(separator) if separator else [prefixes]
            too_long = [label.strip() for label in labels if len(label.strip()) > PREFIX_MAX_LENGTH]
            if too_long:
                raise serializers.ValidationError({
                    api.PREFIXES: _("Prefixes can be at most {max_length} characters long: {labels}").format(
                        max_length=PREFIX_MAX_LENGTH,
                        labels=", ".join(too_long),
                    ),
                })
        return attrs
