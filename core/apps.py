"""AppConfig for the `core` app.

Scope
-----
Holds shared infrastructure pieces used by every controller:
- `CoreController` hooks (Vary header, validation errors, request/response logs),
- request-id middleware and logging filter,
- error templates (`errors/400.html`, `errors/406.html`, `tags/Core/body.json`).
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Standard Django AppConfig; keep defaults lightweight."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core'
