from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .utils.path import default_cache_path, to_abs_path

APP_NAME = "ps-stats"

# just under the 60s Zabbix poll interval: one recomputation per poll
CACHE_TTL = 55
CACHE_SUFFIX = "-cache.yml"

PARENT_METHODS = ("pid", "pidfile", "systemd", "grep")
OUTPUT_FORMATS = ("json", "yaml")
DEFAULT_OUTPUT_FORMAT = "json"


@dataclass
class CFG:
    pid: Optional[int] = None
    pidfile: Optional[Path] = None
    systemd: Optional[str] = None
    grep: Optional[str] = None
    cache_path: Optional[Path] = None
    key: Optional[str] = None
    output_format: str = DEFAULT_OUTPUT_FORMAT
    verbose: bool = False
    prog: str = APP_NAME
    ttl: int = CACHE_TTL

    @property
    def method(self) -> Optional[str]:
        for name in PARENT_METHODS:
            if getattr(self, name) is not None:
                return name
        return None

    @property
    def method_value(self) -> Any:
        name = self.method
        return getattr(self, name) if name else None

    def params(self) -> Dict[str, Any]:
        """Provenance stamp stored in the record: {method: value as given}."""
        name = self.method
        if name is None:
            return {}
        value = self.method_value
        return {name: str(value) if isinstance(value, Path) else value}


def init_cfg_from_args(args, prog: str = APP_NAME) -> CFG:
    cfg = CFG(prog=prog)
    cfg.pid = args.pid
    cfg.pidfile = to_abs_path(args.pidfile)
    cfg.systemd = args.systemd or None
    cfg.grep = args.grep or None
    cfg.key = args.key or None
    cfg.output_format = getattr(args, "format", None) or DEFAULT_OUTPUT_FORMAT
    cfg.verbose = bool(getattr(args, "verbose", False))
    if args.cache:
        cfg.cache_path = to_abs_path(args.cache)
    else:
        cfg.cache_path = default_cache_path(prog, CACHE_SUFFIX)
    return cfg
