"""WSGI entrypoint; production deployments point at `webbase.settings.prod`."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "webbase.settings.prod")

application = get_wsgi_application()
