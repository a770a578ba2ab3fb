"""Inference of parent restarts and child crashes from two PID snapshots.

Only PID equality is available: no exit codes, signals or process history.
Three transitions are told apart:

- restart: the parent PID changed (e.g. ``systemctl restart``),
- reload: the parent survived but every child was replaced (e.g. SIGUSR2 /
  SIGHUP style graceful reloads), or the worker count grew by an integer
  multiple,
- crash: a child vanished beyond what the size change explains.
"""
from __future__ import annotations
import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..models import Pid, StatsRecord
from .heuristics import diff_count

logger = logging.getLogger(__name__)


def update_stats(prev: StatsRecord, parent_pid: Optional[Pid], child_pids: Sequence[Pid]) -> StatsRecord:
    """Return a new record for the snapshot (parent_pid, child_pids); prev is left untouched."""
    restarts = prev.parent_restart_count
    crashes = prev.child_crash_count
    old = list(prev.child_pids)
    new = list(child_pids)
    restarted = False

    if parent_pid != prev.parent_pid:
        restarted = True
        restarts += 1
        logger.debug("parent pid changed %s -> %s", prev.parent_pid, parent_pid)

    # an empty child list carries no information (single-process mode or a
    # lookup failure), so children are compared only when some were found
    if new:
        if len(old) == len(new):
            diff = diff_count(old, new)
            if diff == len(new):
                logger.debug("all %d children replaced, counting as reload", len(new))
                if not restarted:
                    restarted = True
                    restarts += 1
            elif diff != 0:
                logger.debug("%d of %d children replaced", diff, len(new))
                crashes += diff
        elif len(old) < len(new):
            if old:
                restarts += len(new) // len(old) - 1
            expected = len(new) - len(old)
            actual = diff_count(old, new)
            logger.debug("children grew %d -> %d, expected diff %d, actual %d",
                         len(old), len(new), expected, actual)
            if actual > expected:
                crashes += actual - expected
        else:
            expected = len(old) - len(new)
            actual = diff_count(old, new)
            logger.debug("children shrank %d -> %d, expected diff %d, actual %d",
                         len(old), len(new), expected, actual)
            if actual > expected:
                crashes += actual - expected

    return replace(
        prev,
        parent_pid=parent_pid,
        parent_restart_count=restarts,
        child_crash_count=crashes,
        child_pids=tuple(new),
        child_count=len(new),
        params=dict(prev.params),
    )
