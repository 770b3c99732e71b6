from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("prefix_discussion/rest_api/", include("prefix_discussion.core.prefixes.urls")),
]
