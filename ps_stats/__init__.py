from .models import Snapshot, StatsRecord
from .tracking import diff_count, overlap, update_stats
from .cache import CacheLifecycle, YamlStatsStore

__version__ = "0.1.0"

__all__ = [
    "Snapshot",
    "StatsRecord",
    "CacheLifecycle",
    "YamlStatsStore",
    "update_stats",
    "diff_count",
    "overlap",
]
