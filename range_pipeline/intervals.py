from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .errors import ValidationError

@dataclass(frozen=True, order=True)
class Interval:
    """Half-open integer range [start, end)."""
    start: int
    end: int

    def __post_init__(self):
        if self.end < self.start:
            raise ValidationError(f"interval end {self.end} is before start {self.start}")

    @staticmethod
    def from_length(start: int, length: int) -> "Interval":
        if length < 0:
            raise ValidationError(f"negative interval length {length}")
        return Interval(start, start + length)

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def empty(self) -> bool:
        return self.start == self.end

    def contains(self, value: int) -> bool:
        return self.start <= value < self.end

    def overlap(self, other: "Interval") -> Optional["Interval"]:
        """Non-empty intersection with other, or None."""
        s = max(self.start, other.start)
        e = min(self.end, other.end)
        if s < e:
            return Interval(s, e)
        return None

    def shift(self, offset: int) -> "Interval":
        return Interval(self.start + offset, self.end + offset)

    def __repr__(self) -> str:
        return f"Interval({self.start}, {self.end})"

def total_length(intervals: Iterable[Interval]) -> int:
    return sum(iv.length for iv in intervals)

def normalize_intervals(intervals: Iterable[Interval]) -> List[Interval]:
    """Sort, drop empties, and merge overlapping or touching intervals.
    Only meant for reporting; propagation never merges between stages.
    """
    xs = sorted(iv for iv in intervals if not iv.empty)
    if not xs:
        return []
    merged = []
    cs, ce = xs[0].start, xs[0].end
    for iv in xs[1:]:
        if iv.start <= ce:
            ce = max(ce, iv.end)
        else:
            merged.append(Interval(cs, ce))
            cs, ce = iv.start, iv.end
    merged.append(Interval(cs, ce))
    return merged
