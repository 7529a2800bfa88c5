"""Helpers for compact debug logging.

Request bodies can carry an id for every item in the store (a full
reorder of a million entries).  This module shrinks such payloads
before they are emitted to DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def summarize_for_log(
    value: Any,
    *,
    max_items: int = 10,
    max_string: int = 200,
    _depth: int = 0,
) -> Any:
    """Return a shortened copy of *value* suitable for debug logs."""
    if _depth > 20:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, bytes):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        return {
            str(k): summarize_for_log(v, max_items=max_items, max_string=max_string, _depth=_depth + 1)
            for k, v in value.items()
        }

    if isinstance(value, (Sequence, set, frozenset)) and not isinstance(value, (str, bytes, bytearray)):
        values = list(value)
        head = [
            summarize_for_log(v, max_items=max_items, max_string=max_string, _depth=_depth + 1)
            for v in values[:max_items]
        ]
        if len(values) > max_items:
            head.append(f"…<{len(values) - max_items} more>")
        return head

    return repr(value)
