"""Shared validation helpers."""

from __future__ import annotations

from .errors import InvalidConfigurationError


def validate_positive_int(value: int, name: str) -> None:
    """Ensure *value* is an integer of at least one."""
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an integer"
        raise TypeError(msg)

    if value < 1:
        msg = f"{name} must be >= 1"
        raise InvalidConfigurationError(msg)
