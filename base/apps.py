"""AppConfig for the `base` app (index and settings pages)."""

from django.apps import AppConfig


class BaseConfig(AppConfig):
    """Pages only; the app has no models."""
    default_auto_field = "django.db.models.BigAutoField"
    name = "base"
