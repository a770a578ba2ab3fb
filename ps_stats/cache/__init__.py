from .lifecycle import CacheLifecycle
from .store import StatsStore, YamlStatsStore

__all__ = ["CacheLifecycle", "StatsStore", "YamlStatsStore"]
