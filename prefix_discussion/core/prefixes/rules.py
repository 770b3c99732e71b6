"""
Django rules-based permissions for discussion prefixes

Hosts with their own notion of roles can replace any of these with
``rules.set_perm()``.
"""
from __future__ import annotations

from typing import Callable, Union

import django.contrib.auth.models
# typing support in rules depends on https://github.com/dfunckt/django-rules/pull/177
import rules  # type: ignore[import]

UserType = Union[
    django.contrib.auth.models.User, django.contrib.auth.models.AnonymousUser
]


# Global staff are prefix admins.
# (Superusers can already do anything)
is_prefix_admin: Callable[[UserType], bool] = rules.is_staff


@rules.predicate
def can_add_prefix(user: UserType) -> bool:
    """
    Anyone who can author discussions can pick a prefix for them.
    """
    return user.is_authenticated and user.is_active


@rules.predicate
def can_view_prefix(_user: UserType) -> bool:
    """
    Everybody can see prefixes, including anonymous visitors.
    """
    return True


# Prefixes
rules.add_perm("prefix_discussion.add_prefix", can_add_prefix)
rules.add_perm("prefix_discussion.view_prefix", can_view_prefix)
rules.add_perm("prefix_discussion.manage_prefixes", is_prefix_admin)

# Setting (used by the Django admin)
rules.add_perm("prefix_discussion.add_setting", is_prefix_admin)
rules.add_perm("prefix_discussion.change_setting", is_prefix_admin)
rules.add_perm("prefix_discussion.delete_setting", is_prefix_admin)
rules.add_perm("prefix_discussion.view_setting", is_prefix_admin)
