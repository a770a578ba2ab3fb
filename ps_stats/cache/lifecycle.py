"""Turns stateless invocations into one continuous monitor.

The cache file holds the last record; its mtime doubles as the time of the
last computation. Within the freshness window the stored record is returned
as-is, so pollers hitting the probe more often than the TTL never inflate
the counters.
"""
from __future__ import annotations
import logging
import time
from dataclasses import replace
from typing import Callable, Optional

from ..config import CACHE_TTL
from ..models import Snapshot, StatsRecord
from ..tracking import update_stats
from .store import PathLike, StatsStore, YamlStatsStore

logger = logging.getLogger(__name__)


class CacheLifecycle:
    def __init__(self, store: Optional[StatsStore] = None, ttl: float = CACHE_TTL,
                 clock: Callable[[], float] = time.time):
        self.store = store if store is not None else YamlStatsStore()
        self.ttl = ttl
        self.clock = clock

    def load(self, path: PathLike) -> StatsRecord:
        """Read the record at path, creating a zero-valued one first if absent.

        Raises CacheParseError when an existing file cannot be parsed; a
        corrupt cache is never reset since that would silently drop counters.
        """
        if not self.store.exists(path):
            logger.info("initializing stats cache %s", path)
            self.store.write(path, StatsRecord.empty())
        return self.store.read(path)

    def is_fresh(self, path: PathLike, now: Optional[float] = None) -> bool:
        now = self.clock() if now is None else now
        return now - self.store.modified_time(path) <= self.ttl

    def refresh(self, path: PathLike, snapshot: Snapshot, now: Optional[float] = None) -> StatsRecord:
        record = self.load(path)
        if self.is_fresh(path, now):
            logger.debug("cache %s is fresh, returning stored record", path)
            return record

        updated = update_stats(record, snapshot.parent_pid, snapshot.child_pids)
        result = replace(
            updated,
            parent_pid=snapshot.parent_pid,
            child_pids=tuple(snapshot.child_pids),
            child_count=len(snapshot.child_pids),
            params=dict(snapshot.params),
        )
        self.store.write(path, result)
        logger.debug("cache %s refreshed: restarts=%d crashes=%d", path,
                     result.parent_restart_count, result.child_crash_count)
        return result
