"""Pure string operations on paths: normalisation, relative paths and names.

None of these functions raise for malformed input. Non-absolute input to the
normaliser is returned untouched and the relative-path resolver signals "not
computable" with an empty string.
"""

from __future__ import annotations

import typing as t

from . import filesystem
from ._path_utils import (
    has_trailing_separator,
    non_empty_segments,
    split_segments,
    strip_trailing_separator,
)
from .platform import resolve_flavour

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .platform import PathFlavour

CURRENT_DIR: t.Final[str] = "."
PARENT_DIR: t.Final[str] = ".."
_REMOTE_PREFIX: t.Final[str] = "//"
_SCHEME_SUFFIX: t.Final[str] = "://"
_LOCAL_SCHEME: t.Final[str] = "file"


def is_absolute_path(path: str, *, flavour: PathFlavour | None = None) -> bool:
    """Return ``True`` when *path* is anchored at a root (or drive on Windows)."""
    return resolve_flavour(flavour).is_absolute(path)


def _resolve_segments(segments: t.Iterable[str]) -> list[str]:
    """Collapse empty, ``.`` and ``..`` segments in a single forward pass.

    ``..`` pops the previously kept segment; with nothing left to pop it is
    dropped, which clamps traversal at the root.
    """
    kept: list[str] = []
    for segment in segments:
        if not segment or segment == CURRENT_DIR:
            continue
        if segment == PARENT_DIR:
            if kept:
                kept.pop()
            continue
        kept.append(segment)
    return kept


def get_clean_path(path: str, *, flavour: PathFlavour | None = None) -> str:
    """
    Return the canonical form of the absolute *path*.

    Repeated separators and ``.`` segments are dropped, and each ``..`` removes
    the segment before it. Traversal above the root is absorbed silently. A
    trailing separator on the input is kept on the output. Relative paths are
    returned unchanged.

    Parameters
    ----------
    path : str
        The path to normalise. It does not need to exist.
    flavour : PathFlavour | None, optional
        Platform conventions to apply. Defaults to the running platform.

    Returns
    -------
    str
        The normalised path, or *path* itself when it is not absolute.
    """
    flavour = resolve_flavour(flavour)
    if not flavour.is_absolute(path):
        return path

    separator = flavour.separator
    is_directory = has_trailing_separator(path, separator)
    drive, remainder = flavour.split_drive(path)

    segments = _resolve_segments(split_segments(remainder, separator))
    if segments:
        cleaned = drive + "".join(separator + segment for segment in segments)
    else:
        cleaned = flavour.root(drive)

    if is_directory and not cleaned.endswith(separator):
        cleaned += separator
    return cleaned


def _shared_prefix_length(left: t.Sequence[str], right: t.Sequence[str]) -> int:
    """Return how many leading segments *left* and *right* have in common."""
    shared = 0
    for left_segment, right_segment in zip(left, right):
        if left_segment != right_segment:
            break
        shared += 1
    return shared


def get_relative_path(
    from_path: str, to_path: str, *, flavour: PathFlavour | None = None
) -> str:
    """
    Return the path of *to_path* relative to *from_path*.

    *from_path* names a directory unless it lacks a trailing separator and is
    an existing regular file, in which case its containing directory is used.
    *to_path* names a file whenever it lacks a trailing separator; its last
    segment is appended to the result verbatim.

    The climb count follows the depth of *from_path* only when it is at least
    as deep as *to_path*. When *to_path* is deeper no ``..`` is emitted, even
    if *from_path* has an unshared suffix.

    Parameters
    ----------
    from_path : str
        Absolute reference path.
    to_path : str
        Absolute target path.
    flavour : PathFlavour | None, optional
        Platform conventions to apply. Defaults to the running platform.

    Returns
    -------
    str
        The relative path, or ``""`` when either input is not absolute or the
        two paths live on different drives.
    """
    flavour = resolve_flavour(flavour)
    if not (flavour.is_absolute(from_path) and flavour.is_absolute(to_path)):
        return ""

    from_drive, from_remainder = flavour.split_drive(from_path)
    to_drive, to_remainder = flavour.split_drive(to_path)
    if from_drive != to_drive:
        return ""

    separator = flavour.separator
    from_dirs = non_empty_segments(from_remainder, separator)
    to_dirs = non_empty_segments(to_remainder, separator)

    if (
        from_dirs
        and not has_trailing_separator(from_path, separator)
        and filesystem.is_file(from_path)
    ):
        from_dirs.pop()

    file_name = ""
    if to_dirs and not has_trailing_separator(to_path, separator):
        file_name = to_dirs.pop()

    shared = _shared_prefix_length(from_dirs, to_dirs)
    parts: list[str] = []
    if len(from_dirs) >= len(to_dirs):
        parts.extend([PARENT_DIR] * (len(from_dirs) - shared))
    parts.extend(to_dirs[shared:])

    return "".join(part + separator for part in parts) + file_name


def get_base_name(path: str, *, flavour: PathFlavour | None = None) -> str:
    """Return the final component of *path*, ignoring one trailing separator."""
    separator = resolve_flavour(flavour).separator
    trimmed = strip_trailing_separator(path, separator)
    return trimmed.rpartition(separator)[2]


def get_parent_path(path: str, *, flavour: PathFlavour | None = None) -> str:
    """Return *path* up to and including the separator before its last component.

    The parent of a bare root is the root itself. A relative path with no
    separator left once a single trailing separator is removed has no parent
    and yields an empty string.
    """
    flavour = resolve_flavour(flavour)
    separator = flavour.separator
    trimmed = strip_trailing_separator(path, separator)
    head, found, _ = trimmed.rpartition(separator)
    if found:
        return head + found
    if flavour.is_absolute(path):
        return flavour.root(flavour.split_drive(path)[0])
    return ""


def get_file_extension(path: str, *, flavour: PathFlavour | None = None) -> str:
    """Return the extension of *path*'s final component, including the dot."""
    base_name = get_base_name(path, flavour=flavour)
    index = base_name.rfind(".")
    return base_name[index:] if index != -1 else ""


def _is_scheme_char(char: str) -> bool:
    return char.isascii() and char.isalnum()


def is_remote_address(address: str) -> bool:
    """
    Return ``True`` when *address* points at a remote resource.

    Network paths (``//host/share``) are remote, as is anything whose leading
    run of alphanumerics, possibly empty, is followed by ``://``. The ``file``
    scheme is always local.
    """
    if address.startswith(_REMOTE_PREFIX):
        return True

    scheme_end = 0
    while scheme_end < len(address) and _is_scheme_char(address[scheme_end]):
        scheme_end += 1

    scheme = address[:scheme_end]
    return (
        scheme != _LOCAL_SCHEME and address.startswith(_SCHEME_SUFFIX, scheme_end)
    )


__all__ = [
    "get_base_name",
    "get_clean_path",
    "get_file_extension",
    "get_parent_path",
    "get_relative_path",
    "is_absolute_path",
    "is_remote_address",
]
