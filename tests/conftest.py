"""Shared fixtures for pid marker tests."""

import logging
from pathlib import Path

import pytest

from infrastructure.fs import FileSystem


class FakeLiveness:
    """Liveness checker with a fixed set of live pids that records every query."""

    def __init__(self, alive: set[int] | None = None) -> None:
        self.alive = alive or set()
        self.calls: list[int] = []

    def is_alive(self, pid: int) -> bool:
        self.calls.append(pid)
        return pid in self.alive


@pytest.fixture
def fs() -> FileSystem:
    return FileSystem()


@pytest.fixture
def liveness() -> FakeLiveness:
    return FakeLiveness()


@pytest.fixture
def pid_path(tmp_path: Path) -> Path:
    return tmp_path / "run" / "app.pid"


@pytest.fixture
def logger() -> logging.Logger:
    log = logging.getLogger("pidmarker.tests")
    log.setLevel(logging.DEBUG)
    return log


@pytest.fixture
def live_pids():
    """Build a checker that reports the given pids as running."""

    def _make(*pids: int) -> FakeLiveness:
        return FakeLiveness(set(pids))

    return _make
