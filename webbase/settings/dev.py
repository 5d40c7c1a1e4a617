"""
Developer settings (extends base).

Defaults
--------
- DEBUG defaults True (overridable via env).
- Core/base loggers at DEBUG so request lines and settings renders show up.
- SQLite by default unless `DATABASE_URL` is provided.

Security
--------
- Do not use these settings in production; cookies and HTTPS flags are not forced
  here. Use `prod.py` for hardened defaults.
"""

from .base import *  # noqa

DEBUG = env.bool("DEBUG", True)

CORE_LOG_LEVEL = env("CORE_LOG_LEVEL", default="DEBUG")
LOGGING["loggers"]["core"]["level"] = CORE_LOG_LEVEL  # type: ignore[name-defined]
LOGGING["loggers"]["base"]["level"] = CORE_LOG_LEVEL  # type: ignore[name-defined]

