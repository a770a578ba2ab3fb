from __future__ import annotations
from typing import Protocol

from ..config import CFG
from ..models import Snapshot
from .children import child_pids, ensure_alive
from .parent import resolve_parent_pid


class SnapshotProvider(Protocol):
    def provide(self) -> Snapshot: ...


class ProcessSnapshotProvider:
    """Fresh OS-level snapshot of the configured parent and its direct children."""

    def __init__(self, cfg: CFG):
        self.cfg = cfg

    def provide(self) -> Snapshot:
        pid = resolve_parent_pid(self.cfg)
        ensure_alive(pid)
        return Snapshot(parent_pid=pid, child_pids=child_pids(pid), params=self.cfg.params())


def collect(cfg: CFG) -> Snapshot:
    return ProcessSnapshotProvider(cfg).provide()


__all__ = ["SnapshotProvider", "ProcessSnapshotProvider", "collect"]
