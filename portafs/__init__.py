"""Cross-platform path algorithms and file-system helpers.

Path strings are normalised and related to each other with pure functions in
:mod:`portafs.paths`; :mod:`portafs.filesystem` and :mod:`portafs.textio` wrap
the host file system behind boolean and sentinel results.
"""

from __future__ import annotations

from .errors import (
    InvalidConfigurationError,
    PortaFSError,
    UnsupportedOperationError,
)
from .filesystem import (
    CopyConfig,
    CreatePathResult,
    copy_file,
    create_directory,
    create_path,
    create_pipe,
    delete_file,
    exists,
    get_file_size,
    is_dir,
    is_empty_dir,
    is_file,
    is_readable,
    is_writable,
    list_directory,
    rename,
)
from .paths import (
    get_base_name,
    get_clean_path,
    get_file_extension,
    get_parent_path,
    get_relative_path,
    is_absolute_path,
    is_remote_address,
)
from .platform import (
    PLATFORM_OVERRIDE_ENV,
    POSIX_FLAVOUR,
    WINDOWS_FLAVOUR,
    PathFlavour,
    current_flavour,
)
from .textio import ReadResult, WriteMode, read_file_as_text, write_file_as_text

__all__ = [
    "PLATFORM_OVERRIDE_ENV",
    "POSIX_FLAVOUR",
    "WINDOWS_FLAVOUR",
    "CopyConfig",
    "CreatePathResult",
    "InvalidConfigurationError",
    "PathFlavour",
    "PortaFSError",
    "ReadResult",
    "UnsupportedOperationError",
    "WriteMode",
    "copy_file",
    "create_directory",
    "create_path",
    "create_pipe",
    "current_flavour",
    "delete_file",
    "exists",
    "get_base_name",
    "get_clean_path",
    "get_file_extension",
    "get_file_size",
    "get_parent_path",
    "get_relative_path",
    "is_absolute_path",
    "is_dir",
    "is_empty_dir",
    "is_file",
    "is_readable",
    "is_remote_address",
    "is_writable",
    "list_directory",
    "read_file_as_text",
    "rename",
    "write_file_as_text",
]
