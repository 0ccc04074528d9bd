"""Shared helpers for splitting path strings into segments."""

from __future__ import annotations


def split_segments(path: str, separator: str) -> list[str]:
    """Return the substrings of *path* between separators.

    Consecutive separators produce empty segments; callers decide whether to
    keep them. An empty *path* yields an empty list.
    """
    if not path:
        return []
    return path.split(separator)


def non_empty_segments(path: str, separator: str) -> list[str]:
    """Return the segments of *path* with empty entries discarded."""
    return [segment for segment in split_segments(path, separator) if segment]


def has_trailing_separator(path: str, separator: str) -> bool:
    """Return ``True`` when *path* ends with *separator*."""
    return path.endswith(separator)


def strip_trailing_separator(path: str, separator: str) -> str:
    """Drop a single trailing *separator* from *path*, if present."""
    return path[: -len(separator)] if has_trailing_separator(path, separator) else path
