from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


class MissingFieldError(ValueError):
    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(f"Missing required fields: {', '.join(fields)}")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    return False


def require_fields(
    payload: Mapping[str, Any],
    required: Iterable[str],
    *,
    allow_empty: Iterable[str] = (),
) -> None:
    """Raise MissingFieldError unless every required key is present and non-empty.

    Keys listed in ``allow_empty`` only need to be present (e.g. an empty list).
    """

    allow = set(allow_empty)
    missing: list[str] = []
    for key in required:
        if key not in payload:
            missing.append(key)
        elif key not in allow and _is_blank(payload[key]):
            missing.append(key)
        elif key in allow and payload[key] is None:
            missing.append(key)

    if missing:
        raise MissingFieldError(missing)
