"""Thin synchronous wrappers over host file-system primitives.

Every operation reports OS failures through its return value (``False``,
``-1``, an empty list or a :class:`CreatePathResult`) and logs the underlying
error at DEBUG level. Only programming errors raise.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import os
import shutil
import stat
import typing as t

from ._path_utils import non_empty_segments
from ._validators import validate_positive_int
from .errors import UnsupportedOperationError
from .platform import resolve_flavour

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .platform import PathFlavour

PathArg: t.TypeAlias = "os.PathLike[str] | str"

DEFAULT_DIRECTORY_MODE: t.Final[int] = 0o775
DEFAULT_PIPE_MODE: t.Final[int] = 0o666
FILE_SIZE_UNKNOWN: t.Final[int] = -1

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class CopyConfig:
    """
    Configuration for :func:`copy_file`.

    Attributes
    ----------
    buffer_size : int
        Number of bytes moved per read/write cycle (must be >= 1).

    Raises
    ------
    InvalidConfigurationError
        If buffer_size < 1.
    """

    buffer_size: int = 4096

    def __post_init__(self) -> None:
        """Validate copy configuration values."""
        validate_positive_int(self.buffer_size, "buffer_size")


DEFAULT_COPY_CONFIG = CopyConfig()


class CreatePathResult(t.NamedTuple):
    """Outcome of :func:`create_path`.

    ``failing_path`` names the first prefix of the requested path that
    exists as a non-directory or could not be created.
    """

    created: bool
    failing_path: str = ""


def _log_failure(operation: str, path: PathArg, exc: OSError) -> None:
    """Log a swallowed OS error for *operation* on *path*."""
    logger.debug("%s failed for %s: %s", operation, os.fspath(path), exc)


def _stat_mode(path: PathArg) -> int | None:
    """Return ``st_mode`` for *path*, or ``None`` when stat fails."""
    try:
        return os.stat(path).st_mode
    except OSError:
        return None


def exists(path: PathArg) -> bool:
    """Return ``True`` when *path* names an existing entry."""
    return os.access(path, os.F_OK)


def is_readable(path: PathArg) -> bool:
    """Return ``True`` when the current process may read *path*."""
    return os.access(path, os.R_OK)


def is_writable(path: PathArg) -> bool:
    """Return ``True`` when the current process may write *path*."""
    return os.access(path, os.W_OK)


def is_file(path: PathArg) -> bool:
    """Return ``True`` when *path* is a regular file (symlinks are followed)."""
    mode = _stat_mode(path)
    return mode is not None and stat.S_ISREG(mode)


def is_dir(path: PathArg) -> bool:
    """Return ``True`` when *path* is a directory (symlinks are followed)."""
    mode = _stat_mode(path)
    return mode is not None and stat.S_ISDIR(mode)


def is_empty_dir(path: PathArg) -> bool:
    """Return ``True`` when *path* is a directory without entries.

    Directories that cannot be opened are reported as not empty.
    """
    try:
        with os.scandir(path) as entries:
            return next(entries, None) is None
    except OSError as exc:
        _log_failure("is_empty_dir", path, exc)
        return False


def rename(current_path: PathArg, new_path: PathArg) -> bool:
    """Move *current_path* to *new_path*."""
    try:
        os.rename(current_path, new_path)
    except OSError as exc:
        _log_failure("rename", current_path, exc)
        return False
    return True


def delete_file(path: PathArg) -> bool:
    """Remove a file, a symlink or an empty directory."""
    try:
        if os.path.isdir(path) and not os.path.islink(path):
            os.rmdir(path)
        else:
            os.remove(path)
    except OSError as exc:
        _log_failure("delete_file", path, exc)
        return False
    return True


def create_directory(
    path: PathArg,
    mode: int = DEFAULT_DIRECTORY_MODE,
    *,
    flavour: PathFlavour | None = None,
) -> bool:
    """Create the single directory *path*; *mode* is ignored on Windows."""
    flavour = resolve_flavour(flavour)
    try:
        if flavour.has_drive_prefix:
            os.mkdir(path)
        else:
            os.mkdir(path, mode)
    except OSError as exc:
        _log_failure("create_directory", path, exc)
        return False
    return True


def create_pipe(
    path: PathArg,
    mode: int = DEFAULT_PIPE_MODE,
    *,
    flavour: PathFlavour | None = None,
) -> bool:
    """
    Create a named pipe (FIFO) at *path*.

    Raises
    ------
    UnsupportedOperationError
        If the platform flavour has no named-pipe support.
    """
    flavour = resolve_flavour(flavour)
    if not flavour.supports_pipes:
        msg = f"named pipes are not supported on the {flavour.name} platform"
        raise UnsupportedOperationError(msg)

    try:
        os.mkfifo(path, mode)
    except OSError as exc:
        _log_failure("create_pipe", path, exc)
        return False
    return True


def list_directory(
    path: PathArg, *, flavour: PathFlavour | None = None
) -> list[str]:
    """Return the full paths of the entries of *path*, sorted by name.

    An unreadable or missing directory yields an empty list.
    """
    separator = resolve_flavour(flavour).separator
    base = os.fspath(path)
    try:
        with os.scandir(base) as entries:
            names = sorted(entry.name for entry in entries)
    except OSError as exc:
        _log_failure("list_directory", base, exc)
        return []

    prefix = base if base.endswith(separator) else base + separator
    return [prefix + name for name in names]


def get_file_size(path: PathArg) -> int:
    """Return the size of *path* in bytes, or ``-1`` when it cannot be read."""
    try:
        return os.stat(path).st_size
    except OSError as exc:
        _log_failure("get_file_size", path, exc)
        return FILE_SIZE_UNKNOWN


def copy_file(
    source_path: PathArg,
    target_path: PathArg,
    *,
    config: CopyConfig = DEFAULT_COPY_CONFIG,
) -> bool:
    """Copy the bytes of *source_path* over *target_path*.

    The target is created or truncated. Returns ``False`` when either file
    cannot be opened or the copy is interrupted by an OS error.
    """
    try:
        with open(source_path, "rb") as source, open(target_path, "wb") as target:
            shutil.copyfileobj(source, target, config.buffer_size)
    except OSError as exc:
        _log_failure("copy_file", source_path, exc)
        return False
    return True


def create_path(
    path: PathArg,
    *,
    mode: int = DEFAULT_DIRECTORY_MODE,
    flavour: PathFlavour | None = None,
) -> CreatePathResult:
    """
    Create every missing directory along the absolute *path*.

    Components are visited from the root downwards. Existing directories are
    skipped; the walk stops at the first component that exists as something
    other than a directory or that cannot be created.

    Parameters
    ----------
    path : str | os.PathLike[str]
        Absolute directory path to create.
    mode : int, optional
        Permission bits for new directories (ignored on Windows).
    flavour : PathFlavour | None, optional
        Platform conventions to apply. Defaults to the running platform.

    Returns
    -------
    CreatePathResult
        ``created`` is ``False`` for relative input or on failure, in which
        case ``failing_path`` names the offending prefix (drive included).
    """
    flavour = resolve_flavour(flavour)
    text = os.fspath(path)
    if not flavour.is_absolute(text):
        return CreatePathResult(created=False)

    separator = flavour.separator
    drive, remainder = flavour.split_drive(text)
    current = drive
    for segment in non_empty_segments(remainder, separator):
        current += separator + segment

        if exists(current):
            if not is_dir(current):
                logger.debug("create_path blocked by non-directory %s", current)
                return CreatePathResult(created=False, failing_path=current)
            continue

        if not create_directory(current, mode, flavour=flavour):
            return CreatePathResult(created=False, failing_path=current)

    return CreatePathResult(created=True)


__all__ = [
    "DEFAULT_COPY_CONFIG",
    "FILE_SIZE_UNKNOWN",
    "CopyConfig",
    "CreatePathResult",
    "copy_file",
    "create_directory",
    "create_path",
    "create_pipe",
    "delete_file",
    "exists",
    "get_file_size",
    "is_dir",
    "is_empty_dir",
    "is_file",
    "is_readable",
    "is_writable",
    "list_directory",
    "rename",
]
