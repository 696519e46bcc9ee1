"""File discovery, glob expansion, path helpers and exclusion patterns."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable
from typing import Any

__all__ = [
    "find_files",
    "find_files_max_depth",
    "glob_func",
    "glob_func_trim",
    "pwd",
    "relative",
    "get_target_file",
    "extend",
    "double_star_match",
    "exclude",
]

log = logging.getLogger(__name__)

_UNLIMITED_DEPTH = 1 << 16


def _component_regex(part: str, braces: bool) -> str:
    """Translate one path component of a glob pattern into a regular expression."""
    out: list[str] = []
    i = 0
    while i < len(part):
        char = part[i]
        if char == "\\":
            i += 1
            if i >= len(part):
                raise ValueError(f"syntax error in pattern {part!r}")
            out.append(re.escape(part[i]))
        elif char == "*":
            out.append("[^/]*")
        elif char == "?":
            out.append("[^/]")
        elif char == "[":
            start = i + 1
            negate = start < len(part) and part[start] in "^!"
            if negate:
                start += 1
            end = part.find("]", start + 1)
            if end < 0 or start >= len(part):
                raise ValueError(f"syntax error in pattern {part!r}")
            content = part[start:end].replace("\\", "\\\\").replace("[", "\\[")
            if content.startswith("^"):
                content = "\\" + content
            out.append(f"[^/{content}]" if negate else f"(?!/)[{content}]")
            i = end
        elif char == "{" and braces:
            depth, end = 0, -1
            for j in range(i, len(part)):
                if part[j] == "{":
                    depth += 1
                elif part[j] == "}":
                    depth -= 1
                    if depth == 0:
                        end = j
                        break
            if end < 0:
                raise ValueError(f"syntax error in pattern {part!r}")
            alternatives = _split_alternatives(part[i + 1:end])
            out.append("(?:" + "|".join(_component_regex(a, True) for a in alternatives) + ")")
            i = end
        else:
            out.append(re.escape(char))
        i += 1
    return "".join(out)


def _split_alternatives(text: str) -> list[str]:
    result, depth, current = [], 0, []
    for char in text:
        if char == "," and depth == 0:
            result.append("".join(current))
            current = []
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        current.append(char)
    result.append("".join(current))
    return result


def _double_star_regex(pattern: str) -> str:
    parts = pattern.split("/")
    regex = ""
    last = len(parts) - 1
    for position, part in enumerate(parts):
        if part == "**":
            if position == last:
                regex = ".*" if position == 0 else regex[:-1] + "(?:/.*)?"
            else:
                regex += "(?:.*/)?"
            continue
        regex += _component_regex(part, True)
        if position < last:
            regex += "/"
    return regex


def double_star_match(pattern: str, name: str) -> bool:
    """Match a path against a pattern where ``**`` spans directories; raise ValueError on bad patterns."""
    return re.fullmatch(_double_star_regex(pattern), name) is not None


def _has_magic(text: str) -> bool:
    return any(char in text for char in "*?[\\")


def _glob_dir(directory: str, pattern: str) -> list[str]:
    regex = re.compile(_component_regex(pattern, False))
    try:
        names = sorted(os.listdir(directory or "."))
    except OSError:
        return []
    return [
        os.path.normpath(os.path.join(directory, name)) if directory else name
        for name in names
        if regex.fullmatch(name)
    ]


def _glob(pattern: str) -> list[str]:
    """Expand a glob pattern; hidden files are matched too. Raise ValueError on bad patterns."""
    if not _has_magic(pattern):
        return [pattern] if os.path.lexists(pattern) else []
    directory, base = os.path.split(pattern)
    if directory == pattern:
        raise ValueError(f"syntax error in pattern {pattern!r}")
    if not _has_magic(directory):
        return _glob_dir(directory, base)
    return [match for folder in _glob(directory) for match in _glob_dir(folder, base)]


def _find_in(folder: str, patterns: Iterable[str]) -> list[str]:
    return [
        match
        for pattern in patterns
        for match in _glob(os.path.normpath(os.path.join(folder, pattern)))
    ]


def find_files(folder: str, recursive: bool, follow_links: bool, *args: str) -> list[str]:
    """Return the files of folder matching any pattern, optionally in sub folders."""
    depth = _UNLIMITED_DEPTH if recursive else 0
    return find_files_max_depth(folder, depth, follow_links, *args)


def find_files_max_depth(folder: str, max_depth: int, follow_links: bool, *args: str) -> list[str]:
    """Return the files matching any pattern down to max_depth levels of sub folders."""
    visited: set[str] = set()

    def walker(root: str) -> list[str]:
        results = _find_in(root, args)
        root = os.path.abspath(root)
        if max_depth == 0:
            return results

        def walk(current: str) -> None:
            try:
                entries = sorted(os.scandir(current), key=lambda e: e.name)
            except OSError:
                return
            for entry in entries:
                if entry.is_dir(follow_symlinks=False):
                    visited.add(entry.path)
                    depth = os.path.relpath(root, entry.path).count("..")
                    if depth > max_depth:
                        continue
                    results.extend(_find_in(entry.path, args))
                    walk(entry.path)
                elif entry.is_symlink() and follow_links:
                    link = os.readlink(entry.path)
                    if not os.path.isabs(link):
                        link = os.path.join(os.path.dirname(entry.path), link)
                    link = os.path.abspath(link)
                    if link not in visited:
                        results.extend(walker(link))

        walk(root)
        return results

    return walker(folder)


def _flatten(args: Iterable[Any]) -> list[str]:
    result: list[str] = []
    for arg in args:
        if isinstance(arg, (list, tuple)):
            result.extend(_flatten(arg))
        else:
            result.append(str(arg))
    return result


def _glob_args(trim_unmatched: bool, args: Iterable[Any]) -> list[str]:
    result: list[str] = []
    for arg in _flatten(args):
        if any(char in arg for char in "*?[]"):
            try:
                expanded = _glob(arg)
            except ValueError:
                expanded = []
            if expanded:
                result.extend(expanded)
                continue
            if trim_unmatched:
                continue
        result.append(arg)
    return result


def glob_func(*args: Any) -> list[str]:
    """Expand glob patterns among the arguments; unmatched patterns are kept as is."""
    return _glob_args(False, args)


def glob_func_trim(*args: Any) -> list[str]:
    """Expand glob patterns among the arguments; unmatched patterns are dropped."""
    return _glob_args(True, args)


def pwd() -> str:
    """Return the current folder."""
    return os.getcwd()


def relative(folder: str, file: str) -> str:
    """Return file relative to folder when file is absolute, else file unchanged."""
    if not os.path.isabs(file):
        return file
    if not os.path.isabs(folder):
        raise ValueError(f"Rel: can't make {file} relative to {folder}")
    return os.path.relpath(file, folder)


def get_target_file(target_file: str, source_path: str, target_path: str) -> str:
    """Move target_file from source_path into target_path when a target is given."""
    if target_path:
        return os.path.join(target_path, relative(source_path, target_file))
    return target_file


def extend(values: Iterable[str]) -> list[str]:
    """Split comma separated values, dropping blank entries."""
    return [
        item.strip()
        for value in values
        for item in value.split(",")
        if item.strip()
    ]


def exclude(files: list[str], patterns: Iterable[str]) -> list[str]:
    """Return the files that match none of the (comma separated) exclusion patterns."""
    expanded = [os.path.abspath(p) for p in extend(patterns)]
    if not expanded:
        return files
    result: list[str] = []
    for file in files:
        absolute = os.path.abspath(file)
        if any(double_star_match(pattern, absolute) for pattern in expanded):
            log.debug("%s ignored", file)
        else:
            result.append(file)
    return result