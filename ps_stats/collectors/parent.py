from __future__ import annotations
import logging
import os
import re
import subprocess
from pathlib import Path
from typing import Optional

import psutil

from ..config import CFG
from ..errors import TargetNotFoundError, UsageError

logger = logging.getLogger(__name__)

SYSTEMCTL_SHOW = ["systemctl", "show", "--property", "MainPID", "--value"]


def _parse_pid(raw: str, source: str) -> int:
    token = raw.strip()
    try:
        pid = int(token)
    except ValueError:
        raise TargetNotFoundError(f"No process is running with PID: {token!r} (from {source})") from None
    if pid <= 0:
        raise TargetNotFoundError(f"No process is running with PID: {pid} (from {source})")
    return pid


def from_pid(pid: int) -> int:
    return _parse_pid(str(pid), "--pid")


def from_pidfile(path: Path) -> int:
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TargetNotFoundError(f"Can't read pidfile {path}: {exc}") from exc
    return _parse_pid(raw, str(path))


def from_systemd(unit: str) -> int:
    try:
        out = subprocess.check_output(SYSTEMCTL_SHOW + [unit], text=True, stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise TargetNotFoundError(f"Can't query systemd unit {unit}: {exc}") from exc
    # MainPID=0 means the unit has no running main process
    if not out.strip() or out.strip() == "0":
        raise TargetNotFoundError(f"Systemd unit {unit} has no main PID")
    return _parse_pid(out, f"systemd unit {unit}")


def _cmdline(proc) -> str:
    cmdline = proc.info.get("cmdline") or []
    if cmdline:
        return " ".join(cmdline)
    return proc.info.get("name") or ""


def from_grep(pattern: str, prog: Optional[str] = None) -> int:
    """Highest PID whose command line matches pattern, skipping the probe itself."""
    try:
        rx = re.compile(pattern)
    except re.error as exc:
        raise UsageError(f"Invalid --grep pattern {pattern!r}: {exc}") from exc

    own = os.getpid()
    matches = []
    for proc in psutil.process_iter(["pid", "name", "cmdline"]):
        pid = proc.info.get("pid")
        if pid is None or pid == own:
            continue
        hay = _cmdline(proc)
        if not hay or not rx.search(hay):
            continue
        if prog and prog in hay:
            continue
        matches.append(pid)

    if not matches:
        raise TargetNotFoundError(f"No process matches {pattern!r}")
    if len(matches) > 1:
        logger.debug("%d processes match %r, using highest pid", len(matches), pattern)
    return max(matches)


def resolve_parent_pid(cfg: CFG) -> int:
    method = cfg.method
    if method == "pid":
        return from_pid(cfg.pid)
    if method == "pidfile":
        return from_pidfile(cfg.pidfile)
    if method == "systemd":
        return from_systemd(cfg.systemd)
    if method == "grep":
        return from_grep(cfg.grep, cfg.prog)
    raise UsageError("You should specify PID of the running process! "
                     "Provide one of the parameters: [pidfile, pid, systemd, grep]")
