"""
Logging helpers for request-scoped correlation.

Overview
--------
- Exposes `contextvars.ContextVar`s (`request_id_var`, `session_id_var`) that
  store the current request id and session key for the lifetime of the request.
- Provides `RequestContextFilter`, a `logging.Filter` that injects `request_id`
  and `session_id` onto every `LogRecord` so formatters using them never break,
  even when the log line originates outside an HTTP request.

Usage
-----
- `core.middleware.RequestIDMiddleware` sets the request id and adds
  `X-Request-ID` to responses.
- `core.controllers.CoreController` binds the session key once the session is
  available. A safe dash `"-"` is used when no value is present.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")
session_id_var: ContextVar[str] = ContextVar("session_id", default="-")


def current_session_id(request) -> str:
    """Session key of `request`, or `"-"` for requests without a stored session."""
    session = getattr(request, "session", None)
    return getattr(session, "session_key", None) or "-"


class RequestContextFilter(logging.Filter):
    """
    Ensures `%(request_id)s` and `%(session_id)s` are always present in log
    records. Values passed explicitly through `extra=` win.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = request_id_var.get()
        if not hasattr(record, "session_id"):
            record.session_id = session_id_var.get()
        return True
