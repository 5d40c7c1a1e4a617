"""
Application pages.

- `index` (`GET /`): JSON clients get an empty object; every other format is
  served the settings page.
- `show_settings` (`GET /settings`): HTML only; other formats get a
  `406 Not Acceptable` page naming HTML.

Both actions run behind `CoreController`'s hooks (Vary header, validation,
request/response logging).
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.utils.translation import get_language
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.renderers import JSONRenderer, TemplateHTMLRenderer
from rest_framework.response import Response
from rest_framework.viewsets import ViewSetMixin

from core.constants import FORMAT_HTML, FORMAT_JSON
from core.controllers import CoreController

logger = logging.getLogger(__name__)

NOT_ACCEPTABLE_RESPONSE = OpenApiResponse(description="Requested format is not available for this page")


class Application(ViewSetMixin, CoreController):
    """Index and settings pages."""

    # HTML first: requests without an Accept header get the page.
    renderer_classes = [TemplateHTMLRenderer, JSONRenderer]
    # Non-JSON requests to either action end up on the HTML-only settings page.
    acceptable_formats = FORMAT_HTML.upper()

    @extend_schema(
        operation_id="application_index",
        summary="Index",
        responses={200: OpenApiTypes.OBJECT, 406: NOT_ACCEPTABLE_RESPONSE},
    )
    def index(self, request, *args, **kwargs):
        """
        The index page.

        Serves the settings page, unless the requested format is JSON.
        """
        if self.get_request_format(request) != FORMAT_JSON:
            return self.show_settings(request, *args, **kwargs)
        return Response({})

    @extend_schema(
        operation_id="application_settings",
        summary="Settings page (HTML only)",
        responses={200: OpenApiResponse(description="Settings page"), 406: NOT_ACCEPTABLE_RESPONSE},
    )
    def show_settings(self, request, *args, **kwargs):
        """
        Display the settings page.

        If the requested format is not HTML, this returns a `406 Not Acceptable`.
        """
        # Only make this available to HTML requests.
        if self.get_request_format(request) == FORMAT_HTML:
            logger.debug("Rendering settings page!")
            context = {
                "languages": settings.LANGUAGES,
                "language": get_language(),
            }
            return Response(context, template_name="base/settings.html")
        return self.not_acceptable(FORMAT_HTML.upper())
