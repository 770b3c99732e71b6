"""
Prefixes API v1 URLs.
"""

from django.urls import path

from . import views

urlpatterns = [
    path("prefixes/", views.PrefixListView.as_view(), name="prefix-list"),
    path("settings/", views.PrefixSettingsView.as_view(), name="prefix-settings"),
]
