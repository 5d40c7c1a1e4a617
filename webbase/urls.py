"""
Project URL configuration.

Surfaces
--------
- `/` and `/settings` (plus `.json`/`.html` suffixes): Application pages.
- `/i18n/setlang/`: Django's language switch, posted to by the settings page.
- `/schema/`: OpenAPI schema (drf-spectacular).
- `/admin/`: Django admin (back-office only).
"""

from __future__ import annotations

from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("i18n/", include("django.conf.urls.i18n")),
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("", include("base.urls")),
]
