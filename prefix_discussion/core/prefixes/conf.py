"""
Django settings used by the prefixes app.

Hosts configure the app with a single dict in their settings, e.g.::

    PREFIX_DISCUSSION = {
        # Required: the host model that holds discussions. It must inherit
        # PrefixedDiscussionMixin (or otherwise declare a ``prefix`` field).
        "DISCUSSION_MODEL": "forum.Discussion",
        # Optional: initial values for the configuration store.
        "PREFIXES": "Question;Solved",
        "LIST_SEPARATOR": ";",
    }

The values here only seed the configuration store. Once an administrator edits
the prefixes, the stored values win.
"""
from __future__ import annotations

from typing import Any

from django.apps import apps
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import models

DEFAULT_LIST_SEPARATOR = ";"
DEFAULT_PREFIXES = ("Question", "Solved")


def get_app_setting(name: str, default: Any = None) -> Any:
    """
    Return one entry of the PREFIX_DISCUSSION setting, or ``default``.
    """
    return getattr(settings, "PREFIX_DISCUSSION", {}).get(name, default)


def get_default_separator() -> str:
    return get_app_setting("LIST_SEPARATOR", DEFAULT_LIST_SEPARATOR)


def get_default_prefixes(separator: str | None = None) -> str:
    """
    Return the initial prefix list string.

    Without an explicit PREFIXES setting, the default labels are joined with
    the given separator so that they parse back correctly. A separator that
    isn't a string falls back to the built-in one.
    """
    if separator is None:
        separator = get_default_separator()
    if not isinstance(separator, str):
        separator = DEFAULT_LIST_SEPARATOR
    return get_app_setting("PREFIXES", separator.join(DEFAULT_PREFIXES))


def get_discussion_model() -> type[models.Model]:
    """
    Return the host's discussion model, as named by DISCUSSION_MODEL.
    """
    model_name = get_app_setting("DISCUSSION_MODEL")
    if not model_name:
        raise ImproperlyConfigured(
            "PREFIX_DISCUSSION['DISCUSSION_MODEL'] must be set to the host's discussion model."
        )
    try:
        return apps.get_model(model_name, require_ready=False)
    except ValueError as exc:
        raise ImproperlyConfigured(
            "PREFIX_DISCUSSION['DISCUSSION_MODEL'] must be of the form 'app_label.model_name'"
        ) from exc
    except LookupError as exc:
        raise ImproperlyConfigured(
            f"PREFIX_DISCUSSION['DISCUSSION_MODEL'] refers to model '{model_name}' that has not been installed"
        ) from exc
