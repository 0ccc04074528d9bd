"""Behavioural tests for absolute path normalisation."""

from __future__ import annotations

from pathlib import Path

from pytest_bdd import scenario

FEATURES_DIR = Path(__file__).resolve().parent.parent / "features"
FEATURE = str(FEATURES_DIR / "path_normalisation.feature")

from tests.steps import *  # noqa: F403,E402 - import shared step definitions


@scenario(FEATURE, "Dot segments and parent references collapse")
def test_dot_segments_collapse() -> None:
    """``.`` segments vanish and ``..`` pops its predecessor."""


@scenario(FEATURE, "Traversal above the root is absorbed")
def test_traversal_clamped_at_root() -> None:
    """Excess ``..`` segments clamp at the root instead of failing."""


@scenario(FEATURE, "Trailing separators survive normalisation")
def test_trailing_separator_preserved() -> None:
    """Directory-shaped input stays directory-shaped."""


@scenario(FEATURE, "Relative paths are returned unchanged")
def test_relative_passthrough() -> None:
    """Only absolute paths are rewritten."""


@scenario(FEATURE, "Windows drive prefixes are preserved")
def test_windows_drive_preserved() -> None:
    """Drive letters are reattached after resolution."""
