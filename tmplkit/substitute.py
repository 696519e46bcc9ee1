"""Regex substitutions described as sed-like ``/search/replace`` strings."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["RegexReplacer", "init_replacers", "substitute"]

_TEMPLATE = re.compile(r"\$(?:(\$)|\{(\w+)\}|(\w+))")


@dataclass(frozen=True)
class RegexReplacer:
    """A compiled expression and its replacement template ($1, ${name}, $$)."""

    regex: re.Pattern
    replace: str

    def apply(self, content: str) -> str:
        def expand(match: re.Match) -> str:
            def group(ref: re.Match) -> str:
                if ref.group(1):
                    return "$"
                name = ref.group(2) or ref.group(3)
                try:
                    value = match.group(int(name) if name.isdigit() else name)
                except (IndexError, error_types):
                    return ""
                return value or ""

            return _TEMPLATE.sub(group, self.replace)

        return self.regex.sub(expand, content)


error_types = (IndexError, re.error)


def init_replacers(*args: str) -> list[RegexReplacer]:
    """Parse replacer definitions; raise ValueError on a malformed one."""
    result = []
    for raw in args:
        definition = raw.strip()
        if not definition:
            raise ValueError(f"Bad replacer {definition}")
        parts = definition.split(definition[0])
        if len(parts) != 3 or not parts[1]:
            raise ValueError(f"Bad replacer {definition}")
        search, replace = parts[1], parts[2]
        if replace == "d":
            if search.endswith("$"):
                search += r"\n"
                if not search.startswith("(?m)"):
                    search = "(?m)" + search
            replace = ""
        result.append(RegexReplacer(re.compile(search), replace))
    return result


def substitute(content: str, *args: RegexReplacer) -> str:
    """Apply each replacer in turn."""
    for replacer in args:
        content = replacer.apply(content)
    return content