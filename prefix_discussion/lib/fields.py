"""
Convenience functions to make consistent field conventions easier.

The prefix column lives on a model we don't own (the host's discussion model),
so the field definition has to be shareable: the abstract mixin, the setup code
that adds a missing column, and the host's own migrations must all agree on it.
"""
from __future__ import annotations

from django.db import models
from django.utils.translation import gettext_lazy as _

# Length of the prefix column; configured labels longer than this can't be stored.
PREFIX_MAX_LENGTH = 64

# Attribute/column name of the prefix on the discussion model.
PREFIX_FIELD_NAME = "prefix"


def prefix_field(**kwargs) -> models.CharField:
    """
    Return a nullable, short ``CharField`` to hold a discussion prefix.

    NULL is the only representation of "no prefix". Never store "" here.

    You may override any argument that you would normally pass into
    ``CharField``.
    """
    # Set our default arguments
    final_kwargs = {
        "max_length": PREFIX_MAX_LENGTH,
        "null": True,
        "blank": True,
        "default": None,
        "help_text": _("Label displayed in front of the discussion title, if any."),
    }
    # Override our defaults with whatever is passed in.
    final_kwargs.update(kwargs)

    return models.CharField(**final_kwargs)
