"""Shared utilities for react-state-patterns."""

from __future__ import annotations

import fnmatch
from pathlib import Path

DEFAULT_PATTERN = "**/*.{jsx,tsx}"

# Directory names skipped unless the caller passes its own ignore list
DEFAULT_IGNORE = ("node_modules", "dist", "build")

# Maximum file size to read (skip bundles and generated code)
MAX_FILE_SIZE = 2 * 1024 * 1024  # 2 MB


def expand_braces(pattern: str) -> list[str]:
    """``src/**/*.{js,jsx}`` -> ``["src/**/*.js", "src/**/*.jsx"]``; nests."""
    depth = 0
    start = -1
    for i, ch in enumerate(pattern):
        if ch == "{":
            if depth == 0:
                start = i
            depth += 1
        elif ch == "}" and depth:
            depth -= 1
            if depth == 0:
                head, body, tail = pattern[:start], pattern[start + 1:i], pattern[i + 1:]
                return [
                    expanded
                    for option in _split_top_level(body)
                    for expanded in expand_braces(head + option + tail)
                ]
    return [pattern]


def _split_top_level(body: str) -> list[str]:
    parts: list[str] = []
    depth = 0
    current = ""
    for ch in body:
        if ch == "," and depth == 0:
            parts.append(current)
            current = ""
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        current += ch
    parts.append(current)
    return parts


def is_ignored(rel: Path, ignore: list[str] | tuple[str, ...]) -> bool:
    """An ignore entry is either a path component name or a glob on the relative path."""
    rel_posix = rel.as_posix()
    for entry in ignore:
        if entry in rel.parts:
            return True
        for pattern in expand_braces(entry):
            if fnmatch.fnmatch(rel_posix, pattern) or fnmatch.fnmatch(rel_posix, pattern.rstrip("/") + "/*"):
                return True
    return False


def discover_files(
    root: Path,
    pattern: str = DEFAULT_PATTERN,
    ignore: list[str] | tuple[str, ...] = DEFAULT_IGNORE,
) -> list[Path]:
    """Files under root matching pattern, minus ignored paths and large files, sorted."""
    found: set[Path] = set()
    for glob in expand_braces(pattern):
        for item in root.glob(glob):
            if not item.is_file():
                continue
            if is_ignored(item.relative_to(root), ignore):
                continue
            try:
                if item.stat().st_size > MAX_FILE_SIZE:
                    continue
            except OSError:
                continue
            found.add(item)
    return sorted(found)
