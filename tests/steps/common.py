# ruff: noqa: S101
"""pytest-bdd steps shared by every portafs feature."""

from __future__ import annotations

import typing as t

from pytest_bdd import given, parsers, then

from portafs.platform import PathFlavour, current_flavour

if t.TYPE_CHECKING:  # pragma: no cover - typing only
    from pathlib import Path


def resolve_in(workdir: Path, name: str) -> Path:
    """Return *name* (``/``-separated) as a path inside *workdir*."""
    return workdir.joinpath(*name.split("/"))


@given(parsers.cfparse('the "{name}" path flavour'), target_fixture="flavour")
def select_flavour(name: str) -> PathFlavour:
    """Pick the platform conventions for the scenario."""
    return current_flavour(name)


@given("a temporary directory", target_fixture="workdir")
def create_workdir(tmp_path: Path) -> Path:
    """Provide an isolated directory for file-system scenarios."""
    return tmp_path


@given(parsers.cfparse('a file "{name}" containing "{text}"'))
def create_file(workdir: Path, name: str, text: str) -> None:
    """Write *text* to *name* inside the scenario directory."""
    target = resolve_in(workdir, name)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text)


@then(parsers.cfparse('the result should be "{expected}"'))
def check_result(result: str, expected: str) -> None:
    """Ensure the computed path matches *expected*."""
    assert result == expected


@then("the result should be empty")
def check_result_empty(result: str) -> None:
    """Ensure the operation signalled "not computable"."""
    assert result == ""
