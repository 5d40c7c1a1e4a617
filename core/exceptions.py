"""
Control-flow exception used by controller hooks.

A before-hook that has already produced the final response (validation errors,
406) raises `Halt(response)`; `CoreController.handle_exception` returns the
carried response as-is, so the action never runs.
"""

from __future__ import annotations

from django.http import HttpResponse


class Halt(Exception):
    """Stop the current request and answer with `response`."""

    def __init__(self, response: HttpResponse) -> None:
        super().__init__(f"halted with status {response.status_code}")
        self.response = response
