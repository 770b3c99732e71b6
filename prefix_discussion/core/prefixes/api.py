"""
Prefixes API

Anyone using the prefixes app should use these APIs instead of reading or
writing the configuration store or the discussion prefix column directly,
since the two representations of "no prefix" must never be mixed again.

No permissions/rules are enforced by these methods -- these must be enforced
by the callers (hook handlers, views).
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

from django.apps import apps
from django.core.exceptions import FieldDoesNotExist, ImproperlyConfigured
from django.db import DEFAULT_DB_ALIAS, connections, transaction

from prefix_discussion.lib.fields import PREFIX_FIELD_NAME

from .conf import get_default_prefixes, get_default_separator, get_discussion_model
from .data import PrefixSet
from .models import Setting

log = logging.getLogger(__name__)

APP_LABEL = "prefix_discussion"

# Keys of the configuration store
PREFIXES = "prefixes"
LIST_SEPARATOR = "list_separator"
# Set once the '' -> NULL backfill of discussion prefixes has run.
PREFIX_MIXING_FIX_DONE = "prefix_mixing_fix_done"


def get_setting(key: str, default: Any = None) -> Any:
    """
    Returns the stored value for ``key``, or ``default`` if it was never saved.
    """
    setting = Setting.objects.filter(key=key).first()
    return setting.value if setting else default


def save_setting(key: str, value: Any) -> Setting:
    """
    Creates or overwrites the stored value for ``key``.
    """
    setting, _created = Setting.objects.update_or_create(key=key, defaults={"value": value})
    return setting


def touch_settings(values: Mapping[str, Any]) -> list[str]:
    """
    Saves each of the given values whose key has never been saved before.

    Existing values are left alone. Returns the keys that were created.
    """
    created_keys = []
    for key, value in values.items():
        _setting, created = Setting.objects.get_or_create(key=key, defaults={"value": value})
        if created:
            created_keys.append(key)
    return created_keys


def get_prefix_settings() -> dict[str, str]:
    """
    Returns the two administrator-editable values: the prefix list and its separator.

    The store accepts any JSON value. A stored separator that isn't a string
    is ignored in favor of the default one; a stored prefix list that isn't a
    string parses to no prefixes.
    """
    separator = get_setting(LIST_SEPARATOR)
    if not isinstance(separator, str):
        separator = get_default_separator()
    return {
        PREFIXES: get_setting(PREFIXES, get_default_prefixes(separator)),
        LIST_SEPARATOR: separator,
    }


def update_prefix_settings(
    prefixes: str | None = None,
    list_separator: str | None = None,
) -> dict[str, str]:
    """
    Saves new values for the prefix list and/or its separator.

    Processes that already loaded the catalog keep using the old prefixes until
    they restart.
    """
    if prefixes is not None:
        save_setting(PREFIXES, prefixes)
    if list_separator is not None:
        save_setting(LIST_SEPARATOR, list_separator)
    return get_prefix_settings()


def load_prefix_set() -> PrefixSet:
    """
    Reads the configuration store and parses the current PrefixSet.

    This always hits the database; use get_prefixes() for the cached version.
    """
    current = get_prefix_settings()
    return PrefixSet.from_string(current[PREFIXES], current[LIST_SEPARATOR])


def get_prefixes() -> PrefixSet:
    """
    Returns the PrefixSet for this process.

    It's loaded on first access and then kept for the lifetime of the process.
    """
    return apps.get_app_config(APP_LABEL).catalog.get_prefixes()


def normalize_assignment(submitted_value: Any, prefixes: PrefixSet | None = None) -> str | None:
    """
    Returns the value to store for a submitted prefix.

    Configured labels are stored verbatim. Anything else (empty values,
    whitespace, labels that have since been removed or are too long to
    store) silently becomes None, so that a cosmetic field never blocks
    saving a discussion.
    """
    if prefixes is None:
        prefixes = get_prefixes()
    if submitted_value in prefixes:
        return submitted_value
    return None


def normalize_form_values(form_post_values: dict) -> None:
    """
    Normalizes the prefix of an in-flight discussion save payload, in place.
    """
    form_post_values[PREFIX_FIELD_NAME] = normalize_assignment(form_post_values.get(PREFIX_FIELD_NAME))


def _get_prefix_field(model):
    try:
        return model._meta.get_field(PREFIX_FIELD_NAME)
    except FieldDoesNotExist as exc:
        raise ImproperlyConfigured(
            f"{model._meta.label} has no '{PREFIX_FIELD_NAME}' field; inherit PrefixedDiscussionMixin."
        ) from exc


def ensure_prefix_column(using: str = DEFAULT_DB_ALIAS) -> bool:
    """
    Adds the prefix column to the discussion table if the table doesn't have it yet.

    Returns True if the column had to be added.
    """
    Discussion = get_discussion_model()
    field = _get_prefix_field(Discussion)
    connection = connections[using]
    table_name = Discussion._meta.db_table
    with connection.cursor() as cursor:
        columns = {
            column.name for column in connection.introspection.get_table_description(cursor, table_name)
        }
    if field.column in columns:
        return False

    with connection.schema_editor() as schema_editor:
        schema_editor.add_field(Discussion, field)
    log.info("Added column %s to table %s", field.column, table_name)
    return True


def backfill_empty_prefixes() -> int | None:
    """
    Rewrites every empty-string discussion prefix to NULL, once per installation.

    Before version 1.1, choosing "no prefix" saved an empty string, while
    discussions created before the app was installed had NULL. This runs the
    bulk update and records that it's done. If the update fails, the flag is
    not saved and the next call tries again.

    Returns the number of discussions changed, or None if the backfill had
    already run.
    """
    if get_setting(PREFIX_MIXING_FIX_DONE, False):
        log.info("Discussion prefix backfill already done, skipping.")
        return None

    Discussion = get_discussion_model()
    with transaction.atomic():
        num_changed = (
            Discussion._default_manager
            .filter(**{PREFIX_FIELD_NAME: ""})
            .update(**{PREFIX_FIELD_NAME: None})
        )
        save_setting(PREFIX_MIXING_FIX_DONE, True)

    log.info("Discussion prefix backfill done: %d empty prefix(es) set to NULL.", num_changed)
    return num_changed


def structure() -> None:
    """
    Prepares the database: makes sure the prefix column exists, then backfills it.
    """
    ensure_prefix_column()
    backfill_empty_prefixes()


def setup() -> None:
    """
    Installs or upgrades the app: seeds the configuration store and prepares the database.

    This is only ever run explicitly (see the prefix_discussion_setup command),
    never while handling requests.
    """
    separator = get_default_separator()
    created_keys = touch_settings({
        LIST_SEPARATOR: separator,
        PREFIXES: get_default_prefixes(separator),
    })
    if created_keys:
        log.info("Initialized prefix settings: %s", ", ".join(created_keys))
    structure()
    log.info("Prefix Discussion setup complete.")
