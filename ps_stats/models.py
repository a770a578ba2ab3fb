from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .errors import CacheParseError

Pid = Union[int, str]

RECORD_FIELDS = (
    "parent_pid",
    "parent_restart_count",
    "child_count",
    "child_crash_count",
    "child_pids",
    "params",
)
COUNTER_FIELDS = ("parent_restart_count", "child_count", "child_crash_count")


@dataclass(frozen=True)
class Snapshot:
    parent_pid: int
    child_pids: Tuple[int, ...] = ()
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class StatsRecord:
    """Cumulative counters plus the last observed parent/children snapshot."""
    parent_pid: Optional[Pid] = None
    parent_restart_count: int = 0
    child_count: int = 0
    child_crash_count: int = 0
    child_pids: Tuple[Pid, ...] = ()
    params: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def empty(cls, params: Optional[Mapping[str, Any]] = None) -> "StatsRecord":
        return cls(params=dict(params or {}))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "parent_pid": self.parent_pid,
            "parent_restart_count": self.parent_restart_count,
            "child_count": self.child_count,
            "child_crash_count": self.child_crash_count,
            "child_pids": list(self.child_pids),
            "params": dict(self.params),
        }

    @classmethod
    def from_dict(cls, data: Any, path: Optional[str] = None) -> "StatsRecord":
        if not isinstance(data, Mapping):
            raise CacheParseError(path, f"expected a mapping, got {type(data).__name__}")
        missing = [k for k in RECORD_FIELDS if k not in data]
        if missing:
            raise CacheParseError(path, f"missing fields: {', '.join(missing)}")

        for name in COUNTER_FIELDS:
            value = data[name]
            # bool is an int subclass; a cache holding `true` is still corrupt
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise CacheParseError(path, f"{name} must be a non-negative integer, got {value!r}")

        parent_pid = data["parent_pid"]
        if parent_pid is not None:
            parent_pid = _coerce_pid(parent_pid, "parent_pid", path)

        raw_children = data["child_pids"]
        if raw_children is None:
            raw_children = []
        if not isinstance(raw_children, (list, tuple)):
            raise CacheParseError(path, f"child_pids must be a list, got {type(raw_children).__name__}")
        child_pids = tuple(_coerce_pid(p, "child_pids", path) for p in raw_children)
        if data["child_count"] != len(child_pids):
            raise CacheParseError(
                path, f"child_count {data['child_count']} does not match {len(child_pids)} child_pids")

        params = data["params"]
        if params is None:
            params = {}
        if not isinstance(params, Mapping):
            raise CacheParseError(path, f"params must be a mapping, got {type(params).__name__}")

        return cls(
            parent_pid=parent_pid,
            parent_restart_count=data["parent_restart_count"],
            child_count=data["child_count"],
            child_crash_count=data["child_crash_count"],
            child_pids=child_pids,
            params={str(k): v for k, v in params.items()},
        )


def _coerce_pid(value: Any, name: str, path: Optional[str]) -> Pid:
    if isinstance(value, bool):
        raise CacheParseError(path, f"{name} holds a non-PID value {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip():
        token = value.strip()
        return int(token) if token.isdigit() else token
    raise CacheParseError(path, f"{name} holds a non-PID value {value!r}")
