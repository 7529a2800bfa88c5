from __future__ import annotations

import sys

import pytest

from pylistserver.state.policy import (
    HasMorePolicy,
    compute_has_more,
    is_permutation,
    page_bounds,
    parse_js_int,
    unknown_ids,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("20", 20),
        (" 7", 7),
        ("12px", 12),
        ("3.7", 3),
        ("-4", -4),
        ("+5", 5),
        ("", None),
        ("abc", None),
        ("-", None),
        (None, None),
        (8, 8),
        (2.9, 2),
        (float("nan"), None),
        (True, None),
    ],
)
def test_parse_js_int(raw: object, expected: int | None) -> None:
    assert parse_js_int(raw) == expected


def test_page_bounds() -> None:
    assert page_bounds(0, 20) == (0, 20)
    assert page_bounds(40, 5) == (40, 45)
    assert page_bounds(None, 5) is None
    assert page_bounds(-1, 5) is None
    assert page_bounds(0, 0) is None


def test_compute_has_more_policies_disagree_on_last_full_page() -> None:
    kwargs = {"offset": 20, "limit": 20, "returned": 20, "total": 40}

    assert compute_has_more(HasMorePolicy.EXACT, **kwargs) is False
    assert compute_has_more(HasMorePolicy.LEGACY, **kwargs) is True


def test_compute_has_more_exact_without_bounds() -> None:
    assert compute_has_more(HasMorePolicy.EXACT, offset=None, limit=20, returned=0, total=10) is False


def test_is_permutation() -> None:
    known = {1: "a", 2: "b", 3: "c"}

    assert is_permutation([3, 1, 2], known)
    assert not is_permutation([1, 2], known)
    assert not is_permutation([1, 1, 2], known)
    assert not is_permutation([1, 2, 4], known)


def test_unknown_ids() -> None:
    assert unknown_ids([1, 5, 2, 9], {1, 2, 3}) == [5, 9]


def test_parse_js_int_saturates_very_long_digit_runs() -> None:
    assert parse_js_int("9" * 5000) == sys.maxsize
    assert parse_js_int("-" + "9" * 5000) == -sys.maxsize
    assert parse_js_int("9" * 18) == 999_999_999_999_999_999
