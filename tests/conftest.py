"""Pytest configuration.

Run pytest from this project's root. pythonpath in pyproject.toml puts src/
on the path, so the installed package is not required for a test run.
"""

import pytest


@pytest.fixture(autouse=True)
def _isolate_executable_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """A developer's QUICKTYPE_PASTE_EXECUTABLE must not leak into config tests."""
    monkeypatch.delenv("QUICKTYPE_PASTE_EXECUTABLE", raising=False)
