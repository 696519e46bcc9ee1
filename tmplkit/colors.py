"""Terminal colour attributes, colourised printing and Go-style message formatting."""

from __future__ import annotations

import enum
import json
import re
import sys
from typing import Any

__all__ = [
    "Attribute",
    "Color",
    "color",
    "sprint_color",
    "format_message",
    "go_sprintf",
    "color_print",
    "color_println",
    "color_printf",
    "color_error_print",
    "color_error_println",
    "color_error_printf",
]


class Attribute(enum.IntEnum):
    """ANSI SGR attributes."""

    RESET = 0
    BOLD = 1
    FAINT = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK_SLOW = 5
    BLINK_RAPID = 6
    REVERSE_VIDEO = 7
    CONCEALED = 8
    CROSSED_OUT = 9

    FG_BLACK = 30
    FG_RED = 31
    FG_GREEN = 32
    FG_YELLOW = 33
    FG_BLUE = 34
    FG_MAGENTA = 35
    FG_CYAN = 36
    FG_WHITE = 37

    BG_BLACK = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_MAGENTA = 45
    BG_CYAN = 46
    BG_WHITE = 47

    FG_HI_BLACK = 90
    FG_HI_RED = 91
    FG_HI_GREEN = 92
    FG_HI_YELLOW = 93
    FG_HI_BLUE = 94
    FG_HI_MAGENTA = 95
    FG_HI_CYAN = 96
    FG_HI_WHITE = 97

    BG_HI_BLACK = 100
    BG_HI_RED = 101
    BG_HI_GREEN = 102
    BG_HI_YELLOW = 103
    BG_HI_BLUE = 104
    BG_HI_MAGENTA = 105
    BG_HI_CYAN = 106
    BG_HI_WHITE = 107

    @property
    def key(self) -> str:
        """Lower case name without separators, e.g. ``fghiblack``."""
        return self.name.replace("_", "").lower()


def _build_names() -> dict[str, Attribute]:
    names: dict[str, Attribute] = {}
    for attr in Attribute:
        names[attr.key] = attr
        if attr.key.startswith("fg"):
            names[attr.key[2:]] = attr
    return names


_NAMES = _build_names()


def _go_str(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_go_str(v) for v in value) + "]"
    if isinstance(value, dict):
        items = sorted(value.items(), key=lambda kv: str(kv[0]))
        return "map[" + " ".join(f"{_go_str(k)}:{_go_str(v)}" for k, v in items) + "]"
    return str(value)


def _go_sprint(args: tuple) -> str:
    parts: list[str] = []
    previous: Any = None
    for position, arg in enumerate(args):
        if position and not isinstance(arg, str) and not isinstance(previous, str):
            parts.append(" ")
        parts.append(_go_str(arg))
        previous = arg
    return "".join(parts)


class Color:
    """A set of attributes that can wrap text in escape sequences."""

    def __init__(self, *attributes: Attribute) -> None:
        self.attributes: list[Attribute] = list(attributes)

    def add(self, *args: Attribute) -> "Color":
        self.attributes.extend(args)
        return self

    def sprint(self, *args: Any) -> str:
        text = _go_sprint(args)
        if not self.attributes:
            return text
        codes = ";".join(str(int(a)) for a in self.attributes)
        return f"\x1b[{codes}m{text}\x1b[0m"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Color) and self.attributes == other.attributes

    def __repr__(self) -> str:
        return f"Color({', '.join(a.name for a in self.attributes)})"


def color(*args: str) -> Color:
    """Build a Color from attribute names; raise ValueError on unknown or missing ones."""
    result = Color()
    unknown: list[str] = []
    for arg in args:
        for name in re.findall(r"\w+", str(arg)):
            attr = _NAMES.get(name.lower())
            if attr is None:
                unknown.append(f"Attribute not found {name}")
            else:
                result.add(attr)
    if not result.attributes:
        raise ValueError("No color specified")
    if unknown:
        raise ValueError("\n".join(unknown))
    return result


def sprint_color(*args: Any) -> str:
    """Use leading colour-name arguments to colour the message built from the rest."""
    attributes: list[Attribute] = []
    index = 0
    for index, arg in enumerate(args):
        try:
            attributes.extend(color(_go_str(arg)).attributes)
        except ValueError:
            break
    else:
        index = len(args)
    return Color(*attributes).sprint(format_message(*args[index:]))


_VERB = re.compile(r"%([-+# 0]*)(\d+)?(?:\.(\d+))?([a-zA-Z%])")


def _format_verb(verb: str, value: Any, precision: str | None) -> str | None:
    is_num = isinstance(value, (int, float)) and not isinstance(value, bool)
    if verb == "v":
        return _go_str(value)
    if verb == "s":
        return _go_str(value)
    if verb == "d":
        return str(value) if isinstance(value, int) and not isinstance(value, bool) else None
    if verb in "fFeEgG":
        if not is_num:
            return None
        if verb in "gG" and precision is None:
            return _go_str(float(value))
        return format(float(value), f".{precision if precision is not None else 6}{verb}")
    if verb == "q":
        return json.dumps(value) if isinstance(value, str) else None
    if verb == "t":
        return _go_str(value) if isinstance(value, bool) else None
    if verb in "xX":
        if isinstance(value, int) and not isinstance(value, bool):
            text = format(value, "x")
        elif isinstance(value, str):
            text = value.encode().hex()
        else:
            return None
        return text.upper() if verb == "X" else text
    if verb == "c":
        return chr(value) if isinstance(value, int) and not isinstance(value, bool) else None
    return None


def go_sprintf(format: str, *args: Any) -> str:
    """Format like Go's fmt.Sprintf, including its %! error markers."""
    remaining = list(args)
    used = 0

    def replace(match: re.Match) -> str:
        nonlocal used
        flags, width, precision, verb = match.groups()
        if verb == "%":
            return "%"
        if used >= len(remaining):
            return f"%!{verb}(MISSING)"
        value = remaining[used]
        used += 1
        text = _format_verb(verb, value, precision)
        if text is None:
            return f"%!{verb}({type(value).__name__}={_go_str(value)})"
        if width:
            size = int(width)
            if "-" in flags:
                text = text.ljust(size)
            elif "0" in flags and isinstance(value, (int, float)):
                text = text.rjust(size, "0")
            else:
                text = text.rjust(size)
        return text

    result = _VERB.sub(replace, format)
    if used < len(remaining):
        extra = ", ".join(f"{type(v).__name__}={_go_str(v)}" for v in remaining[used:])
        result += f"%!(EXTRA {extra})"
    return result


def format_message(*args: Any) -> str:
    """Use printf formatting when the first argument is a valid format, else join with spaces."""
    if not args:
        return ""
    if len(args) == 1:
        return _go_str(args[0])
    fmt = _go_str(args[0])
    if "%" in fmt:
        result = go_sprintf(fmt, *args[1:])
        if "%!" not in result:
            return result
    return " ".join(_go_str(a) for a in args)


def _write(stream, text: str) -> int:
    stream.write(text)
    return len(text)


def color_print(*args: Any) -> int:
    return _write(sys.stdout, _go_sprint(args))


def color_println(*args: Any) -> int:
    return _write(sys.stdout, " ".join(_go_str(a) for a in args) + "\n")


def color_printf(format: str, *args: Any) -> int:
    return _write(sys.stdout, go_sprintf(format, *args))


def color_error_print(*args: Any) -> int:
    return _write(sys.stderr, _go_sprint(args))


def color_error_println(*args: Any) -> int:
    return _write(sys.stderr, " ".join(_go_str(a) for a in args) + "\n")


def color_error_printf(format: str, *args: Any) -> int:
    return _write(sys.stderr, go_sprintf(format, *args))