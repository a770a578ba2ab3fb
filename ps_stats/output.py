from __future__ import annotations
from typing import Any, Optional

import orjson
import yaml

from .errors import UsageError
from .models import RECORD_FIELDS, StatsRecord


def dumps(obj: Any) -> str:
    # hand-edited caches may carry int keys inside params
    return orjson.dumps(obj, option=orjson.OPT_NON_STR_KEYS).decode()


def render_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple, dict)):
        return dumps(list(value) if isinstance(value, tuple) else value)
    return str(value)


def render(record: StatsRecord, key: Optional[str] = None, fmt: str = "json") -> str:
    data = record.to_dict()
    if key:
        if key not in data:
            raise UsageError(f"Unknown key {key!r}, expected one of: {', '.join(RECORD_FIELDS)}")
        return render_value(data[key])
    if fmt == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip("\n")
    return dumps(data)
