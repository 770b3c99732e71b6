"""
Prefix REST API permissions
"""
from rest_framework.permissions import BasePermission


class PrefixPermission(BasePermission):
    """
    Allows access to users that hold ``perm_name``.
    """
    perm_name = ""

    def has_permission(self, request, view):
        """
        Returns True if the user on the given request has the permission.
        """
        return request.user.has_perm(self.perm_name)


class CanViewPrefixes(PrefixPermission):
    perm_name = "prefix_discussion.view_prefix"


class CanManagePrefixes(PrefixPermission):
    perm_name = "prefix_discussion.manage_prefixes"
