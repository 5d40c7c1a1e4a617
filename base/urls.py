"""
Routes for the Application pages.

`format_suffix_patterns` adds suffix variants (`/settings.json`) next to the
`?format=` override DRF already understands. Any suffix is routed; formats the
controller cannot render get its 406 page.
"""

from django.urls import path
from rest_framework.urlpatterns import format_suffix_patterns

from .views import Application

index = Application.as_view({"get": "index"})
show_settings = Application.as_view({"get": "show_settings"})

urlpatterns = format_suffix_patterns(
    [
        path("", index, name="index"),
        path("settings", show_settings, name="settings"),
    ]
)
