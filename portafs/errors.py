"""Exception hierarchy for portafs.

File-system failures are reported through return values; these exceptions
cover programming errors only.
"""

from __future__ import annotations


class PortaFSError(Exception):
    """Base exception for portafs."""


class UnsupportedOperationError(PortaFSError):
    """Raised when the selected platform flavour lacks a capability."""


class InvalidConfigurationError(PortaFSError, ValueError):
    """Raised when a configuration object receives an unusable value."""


__all__ = [
    "InvalidConfigurationError",
    "PortaFSError",
    "UnsupportedOperationError",
]
