from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Protocol, Union

import yaml

from ..errors import CacheParseError
from ..models import StatsRecord

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class StatsStore(Protocol):
    def exists(self, path: PathLike) -> bool: ...
    def read(self, path: PathLike) -> StatsRecord: ...
    def write(self, path: PathLike, record: StatsRecord) -> None: ...
    def modified_time(self, path: PathLike) -> float: ...


class YamlStatsStore:
    """Keeps one StatsRecord per file as plain block-style YAML.

    Writes overwrite the whole file in place. There is no locking and no
    rename-on-write: invocations are expected to be serialized by the poller.
    """

    def exists(self, path: PathLike) -> bool:
        return Path(path).is_file()

    def read(self, path: PathLike) -> StatsRecord:
        p = Path(path)
        try:
            txt = p.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise CacheParseError(str(p), f"not UTF-8 text ({exc.reason})") from exc
        try:
            data = yaml.safe_load(txt)
        except yaml.YAMLError as exc:
            raise CacheParseError(str(p), f"invalid YAML ({exc})") from exc
        return StatsRecord.from_dict(data, path=str(p))

    def write(self, path: PathLike, record: StatsRecord) -> None:
        p = Path(path)
        with p.open("w", encoding="utf-8") as f:
            yaml.safe_dump(record.to_dict(), f, default_flow_style=False, sort_keys=False)
        logger.debug("stats written to %s", p)

    def modified_time(self, path: PathLike) -> float:
        return os.stat(path).st_mtime
