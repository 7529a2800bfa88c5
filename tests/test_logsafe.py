from __future__ import annotations

from pylistserver._logsafe import summarize_for_log


def test_summarize_for_log_truncates_long_sequences() -> None:
    summary = summarize_for_log({"newSortedIds": list(range(1000))}, max_items=3)

    assert summary["newSortedIds"] == [0, 1, 2, "…<997 more>"]


def test_summarize_for_log_keeps_short_values() -> None:
    payload = {"ids": [1, 2], "query": "№5", "flag": True, "missing": None}

    assert summarize_for_log(payload) == payload


def test_summarize_for_log_truncates_long_strings() -> None:
    summary = summarize_for_log({"query": "x" * 600}, max_string=10)

    assert summary["query"].startswith("x" * 10)
    assert "<truncated>" in summary["query"]


def test_summarize_for_log_handles_sets_and_bytes() -> None:
    assert summarize_for_log(frozenset({4})) == [4]
    assert summarize_for_log(b"abc") == "<bytes:3b>"
