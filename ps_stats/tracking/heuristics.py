from __future__ import annotations
from typing import Hashable, Sequence


def overlap(a: Sequence[Hashable], b: Sequence[Hashable]) -> int:
    """Count greedy pairwise matches between a and b.

    Each element of a consumes at most one equal element of b that an earlier
    element has not consumed yet, so duplicates are matched independently.
    """
    remaining = list(b)
    matched = 0
    for item in a:
        if item in remaining:
            remaining.remove(item)
            matched += 1
    return matched


def diff_count(a: Sequence[Hashable], b: Sequence[Hashable]) -> int:
    """Number of entries of the longer sequence left without a partner."""
    return max(len(a), len(b)) - overlap(a, b)
