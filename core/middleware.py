"""
Core middleware for request correlation.

`RequestIDMiddleware`:
    * Reads `X-Request-ID` (or generates one) and reflects it in the response.
    * Stores the id in a contextvar for use by `core.logging.RequestContextFilter`,
      so the controller hook log lines of one request share an id.
    * Resets the contextvars afterwards; worker threads are reused across requests.
"""

from __future__ import annotations

import re
import uuid
from typing import Callable

from django.http import HttpRequest, HttpResponse

from .logging import request_id_var, session_id_var

HEADER_REQUEST_ID = "X-Request-ID"

# Allow simple, safe request-id tokens coming from clients
_ALLOWED_CHARS = re.compile(r"^[A-Za-z0-9._\-]{1,200}$")


def _coerce_request_id(raw: str | None) -> str:
    """Coerce a client-provided request id to a safe token, or generate a new one."""
    if raw and _ALLOWED_CHARS.match(raw):
        return raw
    return uuid.uuid4().hex


class RequestIDMiddleware:
    """Bind a request id for logging and echo it as `X-Request-ID`."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        rid = _coerce_request_id(request.headers.get(HEADER_REQUEST_ID))
        setattr(request, "request_id", rid)
        rid_token = request_id_var.set(rid)
        sid_token = session_id_var.set("-")
        try:
            response = self.get_response(request)
        finally:
            request_id_var.reset(rid_token)
            session_id_var.reset(sid_token)
        response.headers[HEADER_REQUEST_ID] = rid
        return response
