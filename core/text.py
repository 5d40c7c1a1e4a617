"""Small text helpers used when building user-facing messages."""

from __future__ import annotations

import re
import unicodedata

_NON_WORD = re.compile(r"[^\w ]")


def strip_accents(value: str) -> str:
    """Drop combining marks, e.g. `"Café"` -> `"Cafe"`."""
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def camel_case(value: str) -> str:
    """
    Turn a request path (or any phrase) into a CamelCase page name.

    Punctuation (including `/`) is removed and every space-separated part gets
    its first letter capitalized: `"/settings"` -> `"Settings"`,
    `"/my settings"` -> `"MySettings"`.
    """
    cleaned = _NON_WORD.sub("", strip_accents(value))
    return "".join(part[:1].upper() + part[1:] for part in cleaned.split(" "))
