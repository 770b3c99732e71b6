"""
Prefixes API URLs.
"""

from django.urls import include, path

from .rest_api import urls

app_name = "prefix_discussion"
urlpatterns = [path("", include(urls))]
