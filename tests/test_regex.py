import re

import pytest

from tmplkit.regex import get_regex_group, multi_match


def test_first_matching_expression_wins():
    group = get_regex_group("t1", [r"(?P<num>\d+)", r"(?P<word>[a-z]+)"])
    matches, index = multi_match("abc", *group)
    assert index == 1
    assert matches == {"word": "abc"}


def test_unmatched_optional_group_is_empty():
    group = get_regex_group("t2", [r"(?P<a>x)(?P<b>y)?"])
    matches, index = multi_match("x", *group)
    assert (matches, index) == ({"a": "x", "b": ""}, 0)


def test_no_match():
    group = get_regex_group("t3", [r"zzz"])
    assert multi_match("abc", *group) == ({}, -1)


def test_cache_returns_same_group():
    first = get_regex_group("t4", ["a"])
    assert get_regex_group("t4", ["b"]) is first


def test_bad_expression_raises():
    with pytest.raises(re.error):
        get_regex_group("t5", ["("])