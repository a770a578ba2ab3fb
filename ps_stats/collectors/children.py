from __future__ import annotations
import logging
from typing import Tuple

import psutil

from ..errors import TargetNotFoundError

logger = logging.getLogger(__name__)


def ensure_alive(pid: int) -> None:
    if not psutil.pid_exists(pid):
        raise TargetNotFoundError(f"No process is running with PID: {pid}")


def child_pids(pid: int) -> Tuple[int, ...]:
    """Direct children of pid, sorted; empty when the process has none."""
    try:
        children = psutil.Process(pid).children(recursive=False)
    except psutil.NoSuchProcess as exc:
        raise TargetNotFoundError(f"No process is running with PID: {pid}") from exc
    pids = tuple(sorted(c.pid for c in children))
    if not pids:
        logger.warning("Can't find children pids: parent %s", pid)
    return pids
