"""List and dictionary merging helpers."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from tmplkit.colors import go_sprintf

__all__ = ["merge_lists", "format_list", "merge_dictionaries"]


def merge_lists(*args: list) -> list | None:
    """Concatenate lists; None when none are given, the list itself when one is."""
    if not args:
        return None
    if len(args) == 1:
        return args[0]
    return [item for lst in args for item in lst]


def format_list(format: str, *args: Any) -> list[str]:
    """Apply a printf format to every element."""
    if len(args) == 1 and isinstance(args[0], (list, tuple, set, frozenset)):
        values = list(args[0])
    else:
        values = list(args)
    return [go_sprintf(format, v) for v in values]


def _merge(target: dict, source: Mapping) -> None:
    for key, value in source.items():
        if key not in target:
            target[key] = copy.deepcopy(value)
        elif isinstance(target[key], dict) and isinstance(value, Mapping):
            _merge(target[key], value)


def merge_dictionaries(*args: Mapping | None) -> dict:
    """Deep-merge dictionaries, earlier ones taking precedence."""
    result: dict = {}
    for arg in args:
        if arg is None:
            continue
        if not isinstance(arg, Mapping):
            raise TypeError(f"Cannot convert {type(arg).__name__} to dictionary")
        _merge(result, arg)
    return result