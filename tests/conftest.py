"""Shared fixtures for the probe tests."""

from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from ps_stats.models import StatsRecord


class FakeClock:
    """Settable time source for staleness tests."""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CountingStore:
    """Wraps a store and counts writes."""

    def __init__(self, inner):
        self.inner = inner
        self.writes = 0

    def exists(self, path):
        return self.inner.exists(path)

    def read(self, path):
        return self.inner.read(path)

    def write(self, path, record):
        self.writes += 1
        self.inner.write(path, record)

    def modified_time(self, path):
        return self.inner.modified_time(path)


@pytest.fixture
def make_record():
    def _make(parent_pid=100, child_pids=(1, 2, 3), restarts=0, crashes=0, params=None):
        return StatsRecord(
            parent_pid=parent_pid,
            parent_restart_count=restarts,
            child_count=len(child_pids),
            child_crash_count=crashes,
            child_pids=tuple(child_pids),
            params=dict(params or {"pid": parent_pid}),
        )

    return _make


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache_path(tmp_path):
    return tmp_path / "ps-stats-cache.yml"


@pytest.fixture
def fake_proc():
    def _make(pid, cmdline=None, name=""):
        return SimpleNamespace(pid=pid, info={"pid": pid, "name": name, "cmdline": cmdline})

    return _make


@pytest.fixture(autouse=True)
def _reset_probe_logger():
    yield
    logger = logging.getLogger("ps_stats")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def counting_store():
    from ps_stats.cache.store import YamlStatsStore

    return CountingStore(YamlStatsStore())
