"""Behavioural tests for the file-system facade and text I/O."""

from __future__ import annotations

from pathlib import Path

from pytest_bdd import scenario

FEATURES_DIR = Path(__file__).resolve().parent.parent / "features"
FEATURE = str(FEATURES_DIR / "file_operations.feature")

from tests.steps import *  # noqa: F403,E402 - import shared step definitions


@scenario(FEATURE, "Text written without a final newline reads back with one")
def test_text_round_trip() -> None:
    """The read contract terminates the final line."""


@scenario(FEATURE, "Appending extends existing content")
def test_append_mode() -> None:
    """Append mode keeps earlier writes."""


@scenario(FEATURE, "Reading a missing file fails quietly")
def test_missing_file_read() -> None:
    """Failures are reported without raising."""


@scenario(FEATURE, "Creating a nested path")
def test_create_nested_path() -> None:
    """Every missing directory is created."""


@scenario(FEATURE, "Creation stops at an existing file")
def test_create_path_blocked() -> None:
    """The blocking component is reported."""


@scenario(FEATURE, "Copying a file")
def test_copy_file() -> None:
    """Copies reproduce the source content."""


@scenario(FEATURE, "Listing a directory")
def test_list_directory() -> None:
    """Listings are sorted full paths."""
