"""
Request-scoped validation error bag.

Overview
--------
- `Validation` collects input errors for the current request, keyed by field.
  Hooks and actions add to it; `CoreController.catch_validation_errors` checks
  it before the action runs and answers with 400 when it is not empty.
- Serializer errors (DRF's `{"field": ["msg", ...]}` shape, including nested
  `non_field_errors`) can be merged in with `update()`.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping


class Validation:
    """Mutable mapping of field name -> list of error messages."""

    def __init__(self) -> None:
        self._errors: Dict[str, List[str]] = {}

    def add(self, field: str, message: str) -> None:
        self._errors.setdefault(field, []).append(str(message))

    def update(self, errors: Mapping[str, Any]) -> None:
        """Merge a DRF `serializer.errors` mapping into the bag."""
        for field, messages in errors.items():
            if isinstance(messages, Mapping):
                # Nested serializer: flatten to dotted field names.
                for sub_field, sub_messages in messages.items():
                    for message in _as_list(sub_messages):
                        self.add(f"{field}.{sub_field}", message)
                continue
            for message in _as_list(messages):
                self.add(field, message)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def errors(self) -> Dict[str, List[str]]:
        """Return a copy suitable for templates and JSON bodies."""
        return {field: list(messages) for field, messages in self._errors.items()}

    def clear(self) -> None:
        self._errors.clear()

    def __bool__(self) -> bool:
        return self.has_errors()

    def __repr__(self) -> str:
        return f"<Validation errors={self._errors!r}>"


def _as_list(messages: Any) -> Iterable[Any]:
    if isinstance(messages, (list, tuple)):
        return messages
    return [messages]
