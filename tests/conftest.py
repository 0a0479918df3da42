"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

import logging
import textwrap
from pathlib import Path
from typing import Callable, Iterable

import pytest

from qbit.core.services.install.detection.host import HostContext


class FakeProbe:
    """Availability probe backed by a fixed set of executable names."""

    def __init__(self, available: Iterable[str] = ()) -> None:
        self.available = set(available)
        self.calls: list[str] = []

    def __call__(self, executable: str) -> bool:
        self.calls.append(executable)
        return executable in self.available


class ExplodingExecutor:
    """Executor that fails the test if anything tries to spawn."""

    def __call__(self, argv):  # pragma: no cover - must never run
        raise AssertionError(f"executor must not be invoked: {argv!r}")


class RecordingExecutor:
    """Executor that records argv and returns a fixed exit code."""

    def __init__(self, exit_code: int = 0) -> None:
        self.exit_code = exit_code
        self.calls: list[list[str]] = []

    def __call__(self, argv) -> int:
        self.calls.append(list(argv))
        return self.exit_code


@pytest.fixture
def make_host() -> Callable[..., HostContext]:
    """Build a HostContext with a fake probe, never touching PATH."""

    def _make(
        available: Iterable[str] = (),
        platform: str = "linux",
        override: str | None = None,
    ) -> HostContext:
        return HostContext(
            platform=platform,
            manager_override=override,
            probe=FakeProbe(available),
        )

    return _make


@pytest.fixture
def exploding_executor() -> ExplodingExecutor:
    return ExplodingExecutor()


@pytest.fixture
def make_executor() -> Callable[[int], RecordingExecutor]:
    return RecordingExecutor


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a dedented config file into tmp_path and return its path."""

    def _write(content: str, name: str = "qbit.yml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def echo_lines() -> list[str]:
    """Collects user-facing lines passed to ``echo``."""
    return []


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The CLI reconfigures the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
