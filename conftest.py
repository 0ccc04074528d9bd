"""Global test configuration and shared fixtures."""

from __future__ import annotations

import os
import typing as t

import pytest

from portafs.platform import PLATFORM_OVERRIDE_ENV


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "posix_only: mark test as requiring POSIX-only file-system features",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip POSIX-only tests on Windows hosts."""
    if os.name != "nt":
        return
    skip = pytest.mark.skip(reason="requires POSIX file-system features")
    for item in items:
        if "posix_only" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(autouse=True)
def clear_platform_override(
    monkeypatch: pytest.MonkeyPatch,
) -> t.Generator[None, None, None]:
    """Ensure each test starts from the host platform's flavour."""
    monkeypatch.delenv(PLATFORM_OVERRIDE_ENV, raising=False)
    yield
