"""Matching against groups of cached regular expressions."""

from __future__ import annotations

import re

__all__ = ["multi_match", "get_regex_group"]

_cache: dict[str, list[re.Pattern]] = {}


def multi_match(s: str, *args: re.Pattern) -> tuple[dict[str, str], int]:
    """Return the named groups of the first matching expression and its index, or ({}, -1)."""
    for index, expression in enumerate(args):
        match = expression.search(s)
        if match:
            return {k: v or "" for k, v in match.groupdict().items()}, index
    return {}, -1


def get_regex_group(key: str, definitions: list[str]) -> list[re.Pattern]:
    """Compile the definitions once per key; raise re.error on a bad expression."""
    if key in _cache:
        return _cache[key]
    result = [re.compile(d) for d in definitions]
    _cache[key] = result
    return result