"""Tests for the tuple helpers backing emitter slots."""

from __future__ import annotations

import pytest

from slotevents.domain.array_ops import NOT_FOUND, append, find, remove_at


def test_find_returns_first_match():
    assert find(("a", "b", "a"), "a") == 0
    assert find(("a", "b", "a"), "b") == 1


def test_find_resumes_after_offset():
    source = ("x", "y", "x", "z", "x")
    hits = []
    location = find(source, "x")
    while location != NOT_FOUND:
        hits.append(location)
        location = find(source, "x", location + 1)
    assert hits == [0, 2, 4]


def test_find_missing_element():
    assert find(("a", "b"), "c") == NOT_FOUND
    assert find((), "c") == NOT_FOUND
    assert find(("a",), "a", 5) == NOT_FOUND


def test_find_never_matches_none():
    assert find((None, "a", None), None) == NOT_FOUND
    assert find((None, "a"), "a") == 1


def test_find_negative_offset_starts_at_zero():
    assert find(("a", "b"), "a", -3) == 0


def test_append_returns_new_tuple():
    source = (1, 2)
    result = append(source, 3)
    assert result == (1, 2, 3)
    assert source == (1, 2)


def test_append_to_empty():
    assert append((), "only") == ("only",)


def test_remove_at_preserves_order():
    source = ("a", "b", "c", "d")
    assert remove_at(source, 0) == ("b", "c", "d")
    assert remove_at(source, 2) == ("a", "b", "d")
    assert remove_at(source, 3) == ("a", "b", "c")
    assert source == ("a", "b", "c", "d")


def test_remove_at_out_of_range():
    with pytest.raises(IndexError):
        remove_at(("a",), 1)
    with pytest.raises(IndexError):
        remove_at((), 0)
