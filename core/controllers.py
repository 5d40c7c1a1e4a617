"""
Shared request-lifecycle hooks for controllers.

`CoreController` is a DRF `APIView` that wraps every action with:

Before the action (`initial`)
-----------------------------
1. `set_format`: queue `Vary: Content-Type` (plus `Cookie` / `X-Requested-With`)
   for GET/HEAD so caches keep HTML, JSON and XHR variants apart.
2. DRF's own negotiation, authentication, permission and throttle checks.
3. `bind_params`: validate query params / body with the action's params
   serializer (if any) into the request's `Validation` bag.
4. `catch_validation_errors`: answer 400 immediately when the bag has errors.
5. `log_request`: one DEBUG line per request that reaches the action.

After the action
----------------
- `finalize_response` applies the queued `Vary` value unless the action set its own.
- `dispatch` logs the final status through `log_response`, also when the action raised.

Hooks stop a request by raising `core.exceptions.Halt`; `handle_exception`
returns the carried response untouched.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Tuple

from django.apps import apps
from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.http import Http404, HttpResponse
from django.template.response import TemplateResponse
from django.utils.translation import gettext as _
from rest_framework import exceptions, status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.views import APIView

from .constants import (
    AJAX_REQUESTED_WITH,
    FORMAT_HTML,
    FORMAT_JSON,
    HEADER_REQUESTED_WITH,
    HEADER_VARY,
    STATUSCODE_CONFLICT,
    STATUSCODE_NOT_ACCEPTABLE,
    TEMPLATE_BAD_REQUEST_HTML,
    TEMPLATE_BAD_REQUEST_JSON,
    TEMPLATE_NOT_ACCEPTABLE,
)
from .exceptions import Halt
from .logging import current_session_id, session_id_var
from .text import camel_case
from .validation import Validation

logger = logging.getLogger(__name__)

SAFE_CACHEABLE_METHODS = ("GET", "HEAD")

# Status code -> (level, message). Messages are %-style templates over
# `path`, `format` and `session`; statuses not listed here are not logged.
RESPONSE_LOG_TABLE: Dict[int, Tuple[int, str]] = {
    status.HTTP_204_NO_CONTENT: (
        logging.DEBUG,
        "Returning 204 (No Content)! [session: %(session)s]",
    ),
    status.HTTP_304_NOT_MODIFIED: (
        logging.DEBUG,
        "Returning 304 (Not Modified)! [session: %(session)s]",
    ),
    status.HTTP_400_BAD_REQUEST: (
        logging.WARNING,
        "Returning 400 (Bad Request) for '%(path)s'! [session: %(session)s]",
    ),
    status.HTTP_401_UNAUTHORIZED: (
        logging.WARNING,
        "Returning 401 (Unauthorized) [session: %(session)s]",
    ),
    status.HTTP_404_NOT_FOUND: (
        logging.WARNING,
        "Returning 404 (Not Found) for '%(path)s'! [session: %(session)s]",
    ),
    STATUSCODE_NOT_ACCEPTABLE: (
        logging.WARNING,
        "Returning 406 (Not Acceptable) for '%(path)s' with format '%(format)s'! [session: %(session)s]",
    ),
    STATUSCODE_CONFLICT: (
        logging.WARNING,
        "Returning 409 (Conflict) for '%(path)s'! [session: %(session)s]",
    ),
    status.HTTP_500_INTERNAL_SERVER_ERROR: (
        logging.WARNING,
        "Returning 500 (Internal Error) for '%(path)s'! [session: %(session)s]",
    ),
}


def is_ajax(request) -> bool:
    """True for asynchronous browser requests (`X-Requested-With: XMLHttpRequest`)."""
    return request.headers.get(HEADER_REQUESTED_WITH) == AJAX_REQUESTED_WITH


class CoreController(APIView):
    """
    Base controller carrying the shared hooks.

    Attributes subclasses may override:
        controller_name: name compared with `CORE_SECURE_CONTROLLER`
            (defaults to the class name).
        response_content_type: content type the controller commits to before
            the action runs; it takes precedence over the negotiated format when
            picking the 400 error template.
        params_serializer_class: serializer validating query params (GET/HEAD)
            or the request body (other methods); see `get_params_serializer_class`.
        acceptable_formats: formats named by the 406 page when negotiation
            fails (defaults to every renderer format, upper-cased).
    """

    permission_classes = [AllowAny]
    controller_name: Optional[str] = None
    response_content_type: Optional[str] = None
    params_serializer_class = None
    acceptable_formats: Optional[str] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def dispatch(self, request, *args, **kwargs):
        response = None
        try:
            response = super().dispatch(request, *args, **kwargs)
            return response
        finally:
            # Unhandled exceptions propagate and end up as a 500.
            status_code = response.status_code if response is not None else status.HTTP_500_INTERNAL_SERVER_ERROR
            self.log_response(getattr(self, "request", request), status_code)

    def initial(self, request: Request, *args, **kwargs) -> None:
        self.validation = Validation()
        self.params: Dict[str, Any] = {}
        session_id_var.set(current_session_id(request))

        self.set_format(request)
        super().initial(request, *args, **kwargs)
        self.bind_params(request)
        self.catch_validation_errors(request)
        self.log_request(request)

    def handle_exception(self, exc):
        if isinstance(exc, Halt):
            return exc.response
        if isinstance(exc, exceptions.NotAcceptable):
            return self.not_acceptable(self.get_acceptable_formats())
        return super().handle_exception(exc)

    def perform_content_negotiation(self, request, force=False):
        try:
            return super().perform_content_negotiation(request, force=force)
        except Http404:
            # DRF raises 404 for an unknown `?format=` or suffix.
            raise exceptions.NotAcceptable(available_renderers=self.get_renderers())

    def finalize_response(self, request, response, *args, **kwargs):
        pending_vary = getattr(self, "pending_vary", None)
        if pending_vary and not response.has_header(HEADER_VARY):
            response[HEADER_VARY] = pending_vary
        return super().finalize_response(request, response, *args, **kwargs)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def get_controller_name(self) -> str:
        return self.controller_name or type(self).__name__

    def get_request_format(self, request) -> Optional[str]:
        """
        Negotiated format (`"html"`, `"json"`, ...), or the format the client
        asked for explicitly when negotiation has not happened or failed.
        """
        renderer = getattr(request, "accepted_renderer", None)
        if renderer is not None:
            return renderer.format
        suffix = getattr(self, "kwargs", {}).get(self.settings.FORMAT_SUFFIX_KWARG)
        if suffix:
            return suffix
        return request.GET.get(self.settings.URL_FORMAT_OVERRIDE) or None

    def get_page_name(self) -> str:
        """CamelCase page name from the request path, without its format suffix."""
        path = self.request.path
        suffix = getattr(self, "format_kwarg", None)
        if suffix and path.endswith(f".{suffix}"):
            path = path[: -len(suffix) - 1]
        return camel_case(path) or camel_case(self.get_view_name())

    def get_acceptable_formats(self) -> str:
        if self.acceptable_formats:
            return self.acceptable_formats
        return ", ".join(renderer.format.upper() for renderer in self.get_renderers())

    def get_params_serializer_class(self):
        return self.params_serializer_class

    def secure_app_installed(self) -> bool:
        return apps.is_installed(getattr(settings, "CORE_SECURE_APP", "django.contrib.auth"))

    def render_template(self, template_name: str, context: Optional[Dict[str, Any]] = None,
                        *, status_code: int = status.HTTP_200_OK,
                        content_type: Optional[str] = None) -> TemplateResponse:
        return TemplateResponse(
            self.request,
            template_name,
            context or {},
            status=status_code,
            content_type=content_type,
        )

    # ------------------------------------------------------------------
    # Utility responses
    # ------------------------------------------------------------------
    def not_acceptable(self, acceptable: str) -> TemplateResponse:
        """
        Return a `406 (Not Acceptable)` page naming the `acceptable` formats.

        The message is looked up through gettext, e.g.
        "Settings is only available as HTML."
        """
        message = _("%(page)s is only available as %(acceptable)s.") % {
            "page": self.get_page_name(),
            "acceptable": acceptable,
        }
        return self.render_template(
            TEMPLATE_NOT_ACCEPTABLE,
            {"message": message, "acceptable": acceptable},
            status_code=STATUSCODE_NOT_ACCEPTABLE,
        )

    def bad_request(self) -> TemplateResponse:
        """Generic 400 page, used when neither content type nor format is recognized."""
        return self.render_template(
            TEMPLATE_BAD_REQUEST_HTML,
            {"errors": self.validation.errors()},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------
    def set_format(self, request) -> None:
        """Queue the `Vary` value for cacheable (GET/HEAD) responses."""
        self.pending_vary = None
        if request.method not in SAFE_CACHEABLE_METHODS:
            return
        vary = ["Content-Type"]
        # Cached pages are only reused when the Cookie header matches, i.e. a
        # logged-in user never gets an anonymous copy (and vice versa).
        secure_controller = getattr(settings, "CORE_SECURE_CONTROLLER", "Secure")
        if self.secure_app_installed() and self.get_controller_name() != secure_controller:
            vary.append("Cookie")
        # Keep full pages and XHR fragments apart.
        if is_ajax(request):
            vary.append(HEADER_REQUESTED_WITH)
        self.pending_vary = ",".join(vary)

    def bind_params(self, request: Request) -> None:
        serializer_class = self.get_params_serializer_class()
        if serializer_class is None:
            return
        data = request.query_params if request.method in SAFE_CACHEABLE_METHODS else request.data
        serializer = serializer_class(data=data)
        if serializer.is_valid():
            self.params = dict(serializer.validated_data)
        else:
            self.validation.update(serializer.errors)

    def catch_validation_errors(self, request) -> None:
        """Answer 400 before the action runs when validation errors were recorded."""
        if not self.validation.has_errors():
            return

        # The response content type wins; fall back to the negotiated format.
        content_type = self.response_content_type or ""
        request_format = self.get_request_format(request)
        if FORMAT_JSON in content_type:
            response = self._validation_errors_json()
        elif FORMAT_HTML in content_type:
            response = self._validation_errors_html()
        elif request_format == FORMAT_JSON:
            response = self._validation_errors_json()
        elif request_format == FORMAT_HTML:
            response = self._validation_errors_html()
        else:
            response = self.bad_request()
        raise Halt(response)

    def log_request(self, request) -> None:
        logger.debug(
            "Received %s request for '%s'... [session: %s]",
            self.get_request_format(request) or "-",
            request.path,
            current_session_id(request),
        )

    def log_response(self, request, status_code: int) -> None:
        entry = RESPONSE_LOG_TABLE.get(status_code)
        if entry is None:
            return
        level, message = entry
        logger.log(
            level,
            message,
            {
                "path": request.path,
                "format": self.get_request_format(request) or "-",
                "session": current_session_id(request),
            },
        )

    # ------------------------------------------------------------------
    # 400 bodies
    # ------------------------------------------------------------------
    def _validation_errors_json(self) -> HttpResponse:
        errors = self.validation.errors()
        return self.render_template(
            TEMPLATE_BAD_REQUEST_JSON,
            {
                "status": status.HTTP_400_BAD_REQUEST,
                "errors": errors,
                "errors_json": json.dumps(errors, cls=DjangoJSONEncoder),
            },
            status_code=status.HTTP_400_BAD_REQUEST,
            content_type="application/json",
        )

    def _validation_errors_html(self) -> HttpResponse:
        return self.render_template(
            TEMPLATE_BAD_REQUEST_HTML,
            {"errors": self.validation.errors()},
            status_code=status.HTTP_400_BAD_REQUEST,
        )
