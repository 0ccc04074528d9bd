"""Whole-file text reading and writing."""

from __future__ import annotations

import enum
import logging
import os
import typing as t

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .filesystem import PathArg

DEFAULT_ENCODING: t.Final[str] = "utf-8"
LINE_TERMINATOR: t.Final[str] = "\n"

logger = logging.getLogger(__name__)


class WriteMode(enum.Enum):
    """How :func:`write_file_as_text` treats existing content."""

    TRUNCATE = "w"
    APPEND = "a"


class ReadResult(t.NamedTuple):
    """Outcome of :func:`read_file_as_text`."""

    ok: bool
    content: str = ""


def _reassemble_lines(raw: str) -> str:
    """Return *raw* with every line, including the last, ending in a newline."""
    if not raw:
        return ""
    lines = raw.split(LINE_TERMINATOR)
    if raw.endswith(LINE_TERMINATOR):
        lines.pop()
    return "".join(line + LINE_TERMINATOR for line in lines)


def read_file_as_text(
    path: PathArg, *, encoding: str = DEFAULT_ENCODING
) -> ReadResult:
    """
    Read *path* as text, line by line.

    Lines are split on ``\\n`` only; carriage returns survive as ordinary
    characters. Every line is terminated with ``\\n`` in the result, so a
    file without a final newline gains one.

    Parameters
    ----------
    path : str | os.PathLike[str]
        File to read.
    encoding : str, optional
        Text encoding of the file. Defaults to UTF-8.

    Returns
    -------
    ReadResult
        ``(True, content)`` on success, ``(False, "")`` when the file cannot
        be opened or decoded.
    """
    try:
        with open(path, encoding=encoding, newline="") as handle:
            raw = handle.read()
    except (OSError, UnicodeError) as exc:
        logger.debug("read_file_as_text failed for %s: %s", os.fspath(path), exc)
        return ReadResult(ok=False)
    return ReadResult(ok=True, content=_reassemble_lines(raw))


def write_file_as_text(
    path: PathArg,
    content: str,
    mode: WriteMode = WriteMode.TRUNCATE,
    *,
    last_modified_time: float = 0,
    encoding: str = DEFAULT_ENCODING,
) -> bool:
    """
    Write *content* to *path* verbatim, without newline translation.

    When *last_modified_time* is non-zero it is applied to the file as both
    access and modification time once the content is written.
    """
    try:
        with open(path, mode.value, encoding=encoding, newline="") as handle:
            handle.write(content)
        if last_modified_time:
            os.utime(path, (last_modified_time, last_modified_time))
    except (OSError, UnicodeError) as exc:
        logger.debug("write_file_as_text failed for %s: %s", os.fspath(path), exc)
        return False
    return True


__all__ = [
    "DEFAULT_ENCODING",
    "ReadResult",
    "WriteMode",
    "read_file_as_text",
    "write_file_as_text",
]
