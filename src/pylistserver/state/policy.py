"""Paging and validation policy.

This module contains *no* state.  The store calls into it to decide what
a page looks like and whether a submitted order or selection is acceptable.
"""

from __future__ import annotations

import sys
from collections.abc import Collection, Container, Sequence
from enum import StrEnum

_MAX_INT_DIGITS = 18


class HasMorePolicy(StrEnum):
    EXACT = "exact"
    LEGACY = "legacy"


def parse_js_int(value: object) -> int | None:
    """Parse *value* the way JavaScript ``parseInt`` does.

    Leading whitespace and a sign are accepted, then the longest run of
    digits.  ``"12px"`` gives ``12`` and ``"3.7"`` gives ``3``.  Returns
    ``None`` where ``parseInt`` would return ``NaN``.  Digit runs longer
    than 18 characters saturate at ``sys.maxsize``, so a huge offset pages
    past every candidate and a huge limit reaches the end of the list.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value)

    text = str(value).lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for ch in text:
        if not "0" <= ch <= "9":
            break
        digits += ch
    if not digits:
        return None
    # Beyond any list length; int() refuses very long digit strings.
    if len(digits) > _MAX_INT_DIGITS:
        return sign * sys.maxsize
    return sign * int(digits)


def page_bounds(offset: int | None, limit: int | None) -> tuple[int, int] | None:
    """Return the ``[start, stop)`` slice for a page, or ``None`` for an empty page."""
    if offset is None or limit is None:
        return None
    if offset < 0 or limit <= 0:
        return None
    return offset, offset + limit


def compute_has_more(
    policy: HasMorePolicy,
    *,
    offset: int | None,
    limit: int | None,
    returned: int,
    total: int,
) -> bool:
    """Decide the ``hasMore`` flag of a page.

    Policy:
    - ``EXACT``: more candidates exist past ``offset + limit``.
    - ``LEGACY``: the page is shorter than the whole candidate list.  A
      final page that is exactly full still reports ``True``.
    """
    if policy == HasMorePolicy.LEGACY:
        return returned < total
    if offset is None or limit is None or offset < 0 or limit <= 0:
        return False
    return offset + limit < total


def is_permutation(ids: Sequence[int], known: Collection[int]) -> bool:
    """``True`` when *ids* holds every id of *known* exactly once."""
    if len(ids) != len(known):
        return False
    if len(set(ids)) != len(ids):
        return False
    return all(item_id in known for item_id in ids)


def unknown_ids(ids: Sequence[int], known: Container[int]) -> list[int]:
    return [item_id for item_id in ids if item_id not in known]
