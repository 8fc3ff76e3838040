from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from .errors import ValidationError
from .intervals import Interval, total_length

SEED_MODES = ("ranges", "points")

@dataclass(frozen=True)
class SeedSet:
    """Initial intervals fed into a pipeline. Overlaps are allowed and kept."""
    intervals: Tuple[Interval, ...] = ()

    @staticmethod
    def from_ranges(pairs: Iterable[Tuple[int, int]]) -> "SeedSet":
        """Build from (start, length) pairs."""
        return SeedSet(tuple(Interval.from_length(int(s), int(n)) for (s, n) in pairs))

    @staticmethod
    def from_points(values: Iterable[int]) -> "SeedSet":
        """Build from discrete values, each a unit-length interval."""
        return SeedSet(tuple(Interval(int(v), int(v) + 1) for v in values))

    @staticmethod
    def from_numbers(numbers: Iterable[int], mode: str = "ranges") -> "SeedSet":
        """Build from a flat number list; mode says how to read it."""
        numbers = list(numbers)
        if mode == "points":
            return SeedSet.from_points(numbers)
        if mode == "ranges":
            if len(numbers) % 2:
                raise ValidationError(f"ranges mode needs an even count of numbers, got {len(numbers)}")
            return SeedSet.from_ranges(zip(numbers[0::2], numbers[1::2]))
        raise ValidationError(f"unknown seed mode {mode!r}, expected one of {SEED_MODES}")

    def __iter__(self) -> Iterator[Interval]:
        return iter(self.intervals)

    def __len__(self) -> int:
        return len(self.intervals)

    def contains(self, value: int) -> bool:
        return any(iv.contains(value) for iv in self.intervals)

    @property
    def total_length(self) -> int:
        return total_length(self.intervals)
