"""
Key Usage Tracking

Counts how many times each key has been consumed during the current cycle.
A key whose count reaches its key index count is exhausted until the next
cycle reset.
"""

from typing import Dict, Iterable, List, Set

from .links import KeyIndex


class UsageTracker:
    """Per-cycle key consumption counters for one game."""

    def __init__(self, index: KeyIndex):
        self.index = index
        self.start_counts: Dict[str, int] = {}
        self.end_counts: Dict[str, int] = {}
        self.used_ids: Set[str] = set()
        self.cycles = 0

    def reset(self) -> None:
        """Start a new cycle."""
        self.start_counts = {}
        self.end_counts = {}
        self.used_ids = set()
        self.cycles += 1

    def mark_used(self, start_keys: Iterable[str], end_keys: Iterable[str]) -> None:
        # Keys missing from the index are ignored, and counts stop at the index count
        for start in start_keys:
            limit = self.index.starts.get(start)
            if not limit:
                continue
            self.start_counts[start] = min(self.start_counts.get(start, 0) + 1, limit)
        for end in end_keys:
            limit = self.index.ends.get(end)
            if not limit:
                continue
            self.end_counts[end] = min(self.end_counts.get(end, 0) + 1, limit)

    def filter_usable_starts(self, keys: Iterable[str]) -> List[str]:
        """Return the keys that still have unused links starting with them."""
        return [key for key in keys if self._usable(key, self.index.starts, self.start_counts)]

    def filter_usable_ends(self, keys: Iterable[str]) -> List[str]:
        """Return the keys that still have unused links ending with them."""
        return [key for key in keys if self._usable(key, self.index.ends, self.end_counts)]

    @staticmethod
    def _usable(key: str, totals: Dict[str, int], counts: Dict[str, int]) -> bool:
        total = totals.get(key, 0)
        return total > 0 and counts.get(key, 0) < total
