"""Platform flavours shared across portafs modules.

Each flavour bundles the separator, the absoluteness rule and the optional
capabilities (drive prefixes, named pipes) of one family of operating systems.
The path algorithms consult only flavour attributes, so the supported matrix
lives in this module alone.
"""

from __future__ import annotations

import dataclasses as dc
import os
import sys
import typing as t

# Tests set this override to emulate alternative platforms (for example
# Windows) without needing to spawn a different OS.
PLATFORM_OVERRIDE_ENV: t.Final[str] = "PORTAFS_PLATFORM_OVERRIDE"

DRIVE_PREFIX_LENGTH: t.Final[int] = 2


@dc.dataclass(frozen=True, slots=True)
class PathFlavour:
    """
    Path conventions and capabilities of a platform family.

    Attributes
    ----------
    name : str
        Short identifier used in logs and reprs.
    separator : str
        The single-character directory separator.
    has_drive_prefix : bool
        Whether absolute paths start with a two-character drive (``C:``).
    supports_pipes : bool
        Whether named pipes (FIFOs) can be created on the file system.
    """

    name: str
    separator: str
    has_drive_prefix: bool
    supports_pipes: bool

    def is_absolute(self, path: str) -> bool:
        """Return ``True`` when *path* is anchored at a root or drive."""
        if not path:
            return False
        if self.has_drive_prefix:
            return len(path) >= DRIVE_PREFIX_LENGTH and (
                path[0].isalpha() and path[1] == ":"
            )
        return path[0] == self.separator

    def split_drive(self, path: str) -> tuple[str, str]:
        """Return ``(drive, remainder)``; the drive is empty without prefixes."""
        if not self.has_drive_prefix:
            return "", path
        return path[:DRIVE_PREFIX_LENGTH], path[DRIVE_PREFIX_LENGTH:]

    def root(self, drive: str = "") -> str:
        """Return the bare root for *drive* (``/`` or ``C:\\``)."""
        return f"{drive}{self.separator}"


POSIX_FLAVOUR: t.Final[PathFlavour] = PathFlavour(
    name="posix", separator="/", has_drive_prefix=False, supports_pipes=True
)
WINDOWS_FLAVOUR: t.Final[PathFlavour] = PathFlavour(
    name="windows", separator="\\", has_drive_prefix=True, supports_pipes=False
)

# Map ``sys.platform`` prefixes to flavours. Prefixes should match the start
# of ``sys.platform`` (e.g. ``"win"`` for ``"win32"``); anything unmatched is
# treated as POSIX.
_FLAVOURS_BY_PREFIX: t.Final[tuple[tuple[str, PathFlavour], ...]] = (
    ("win", WINDOWS_FLAVOUR),
)


def _normalise(platform: str) -> str:
    """Return a lowercase version of *platform* suitable for prefix checks."""
    return platform.strip().lower()


def _current_platform(platform: str | None = None) -> str:
    """Return the effective platform name, honouring test overrides."""
    if platform:
        return _normalise(platform)

    if override := os.getenv(PLATFORM_OVERRIDE_ENV):
        return _normalise(override)

    return _normalise(sys.platform)


def current_flavour(platform: str | None = None) -> PathFlavour:
    """Return the flavour for *platform* (default: the running platform)."""
    platform_name = _current_platform(platform)
    return next(
        (
            flavour
            for prefix, flavour in _FLAVOURS_BY_PREFIX
            if platform_name.startswith(prefix)
        ),
        POSIX_FLAVOUR,
    )


def resolve_flavour(flavour: PathFlavour | None) -> PathFlavour:
    """Return *flavour*, falling back to the current platform's flavour."""
    return flavour if flavour is not None else current_flavour()


__all__ = [
    "PLATFORM_OVERRIDE_ENV",
    "POSIX_FLAVOUR",
    "WINDOWS_FLAVOUR",
    "PathFlavour",
    "current_flavour",
    "resolve_flavour",
]
