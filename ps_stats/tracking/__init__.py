from .comparator import update_stats
from .heuristics import diff_count, overlap

__all__ = ["update_stats", "diff_count", "overlap"]
