"""
Prefixes app admin
"""
from __future__ import annotations

from django.contrib import admin

from .models import Setting


@admin.register(Setting)
class SettingAdmin(admin.ModelAdmin):
    """
    Admin definition for the prefix configuration store.

    Changes only reach a running process after it restarts, since each process
    caches its prefixes.
    """
    fields = ["key", "value"]
    list_display = ["key", "value", "updated"]
    search_fields = ["key"]

    def get_readonly_fields(self, request, obj=None):
        """
        Don't rename existing settings, only edit their values.
        """
        if obj is not None:
            return ["key"]
        return []

    def has_module_permission(self, request):
        """
        Show the app in the admin index to whoever manages prefixes.
        """
        return request.user.has_perm("prefix_discussion.manage_prefixes")
