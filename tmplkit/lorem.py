"""Lorem ipsum text generation."""

from __future__ import annotations

import enum
import random

__all__ = ["LoremKind", "get_lorem_kind", "lorem"]


class LoremKind(enum.IntEnum):
    WORD = 1
    SENTENCE = 2
    PARAGRAPH = 3
    HOST = 4
    EMAIL = 5
    URL = 6


_ALIASES = {
    LoremKind.WORD: ("1", "word"),
    LoremKind.SENTENCE: ("2", "", "words", "sentence"),
    LoremKind.PARAGRAPH: ("3", "para", "paragraph", "sentences"),
    LoremKind.HOST: ("4", "host"),
    LoremKind.EMAIL: ("5", "email"),
    LoremKind.URL: ("6", "url"),
}

_WORDS = (
    "lorem ipsum dolor sit amet consectetur adipiscing elit sed do eiusmod tempor "
    "incididunt ut labore et dolore magna aliqua enim ad minim veniam quis nostrud "
    "exercitation ullamco laboris nisi aliquip ex ea commodo consequat duis aute irure "
    "in reprehenderit voluptate velit esse cillum fugiat nulla pariatur excepteur sint "
    "occaecat cupidatat non proident sunt culpa qui officia deserunt mollit anim id est "
    "laborum expedita hac laudes sequatur aer deo vos integer dicam factis"
).split()

_TLDS = ("com", "net", "org", "info")


def get_lorem_kind(name: str) -> LoremKind:
    """Convert a name or number to a LoremKind; raise ValueError if unknown."""
    lowered = name.lower()
    for kind, aliases in _ALIASES.items():
        if lowered in aliases:
            return kind
    raise ValueError(f"Undefined Lorem kind {name}")


def _word(low: int, high: int) -> str:
    candidates = [w for w in _WORDS if low <= len(w) <= high] or list(_WORDS)
    return random.choice(candidates)


def _sentence(low: int, high: int) -> str:
    count = random.randint(min(low, high), max(low, high))
    words = [random.choice(_WORDS) for _ in range(max(count, 1))]
    text = " ".join(words)
    return text[0].upper() + text[1:] + "."


def _host() -> str:
    return f"www.{random.choice(_WORDS)}{random.choice(_WORDS)}.{random.choice(_TLDS)}"


def lorem(kind: int, *args: int) -> str:
    """Generate lorem text; args are optional minimum and maximum (default 3 and 10)."""
    low = args[0] if args else 3
    high = args[1] if len(args) > 1 else 10
    if kind == LoremKind.SENTENCE:
        return _sentence(low, high)
    if kind == LoremKind.PARAGRAPH:
        count = random.randint(min(low, high), max(low, high))
        return " ".join(_sentence(low, high) for _ in range(max(count, 1)))
    if kind == LoremKind.WORD:
        return _word(low, high)
    if kind == LoremKind.HOST:
        return _host()
    if kind == LoremKind.EMAIL:
        return f"{random.choice(_WORDS)}@example.com"
    if kind == LoremKind.URL:
        return f"http://{_host()}/{random.choice(_WORDS)}"
    raise ValueError(f"Unknown lorem type {kind}")