from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .errors import ValidationError
from .intervals import Interval

logger = logging.getLogger(__name__)

EntryRecord = Tuple[int, int, int]  # (destination_start, source_start, length)

@dataclass(frozen=True)
class RangeEntry:
    """Affine rule: [source_start, source_start+length) -> [destination_start, ...)."""
    destination_start: int
    source_start: int
    length: int

    def __post_init__(self):
        if self.length < 0:
            raise ValidationError(f"range entry length must be >= 0, got {self.length}")

    @property
    def source(self) -> Interval:
        return Interval(self.source_start, self.source_start + self.length)

    @property
    def destination(self) -> Interval:
        return Interval(self.destination_start, self.destination_start + self.length)

    @property
    def offset(self) -> int:
        return self.destination_start - self.source_start

    def contains(self, value: int) -> bool:
        return self.source_start <= value < self.source_start + self.length

    def forward(self, value: int) -> Optional[int]:
        if self.contains(value):
            return self.destination_start + (value - self.source_start)
        return None

    def backward(self, value: int) -> Optional[int]:
        if self.destination_start <= value < self.destination_start + self.length:
            return self.source_start + (value - self.destination_start)
        return None

@dataclass(frozen=True)
class Fragment:
    """Post-mapping interval; entry is the index of the entry that mapped it, None for pass-through."""
    interval: Interval
    entry: Optional[int] = None

    @property
    def mapped(self) -> bool:
        return self.entry is not None

@dataclass(frozen=True)
class Stage:
    """Ordered range table. Unmatched values pass through unchanged.
    Entries should not overlap on their source ranges; if they do, the first
    entry in declaration order wins.
    """
    name: str
    entries: Tuple[RangeEntry, ...] = ()

    @staticmethod
    def from_records(name: str, records: Iterable[EntryRecord]) -> "Stage":
        return Stage(name, tuple(RangeEntry(int(d), int(s), int(n)) for (d, s, n) in records))

    def forward(self, value: int) -> int:
        for e in self.entries:
            mapped = e.forward(value)
            if mapped is not None:
                return mapped
        return value

    def backward(self, value: int) -> int:
        for e in self.entries:
            unmapped = e.backward(value)
            if unmapped is not None:
                return unmapped
        return value

    def forward_array(self, values: np.ndarray) -> np.ndarray:
        """Vectorised forward over an int64 array, first match wins."""
        values = np.asarray(values, dtype=np.int64)
        out = values.copy()
        pending = np.ones(values.shape, dtype=bool)
        for e in self.entries:
            if e.length == 0:
                continue
            hit = pending & (values >= e.source_start) & (values < e.source_start + e.length)
            out[hit] = values[hit] + e.offset
            pending &= ~hit
        return out

    def split_fragments(self, interval: Interval) -> List[Fragment]:
        """Cut interval along entry boundaries and map each piece.

        Uses an explicit work stack: a remainder left or right of a matched
        overlap goes back on the stack to be matched against all entries again.
        Total fragment length always equals interval.length.
        """
        todo = [interval]
        out: List[Fragment] = []
        while todo:
            cur = todo.pop()
            for idx, e in enumerate(self.entries):
                ov = cur.overlap(e.source)
                if ov is None:
                    continue
                out.append(Fragment(ov.shift(e.offset), idx))
                if ov.start > cur.start:
                    todo.append(Interval(cur.start, ov.start))
                if cur.end > ov.end:
                    todo.append(Interval(ov.end, cur.end))
                break
            else:
                out.append(Fragment(cur, None))
        logger.debug("stage %s: %r -> %d fragments", self.name, interval, len(out))
        return out

    def split(self, interval: Interval) -> List[Interval]:
        return [f.interval for f in self.split_fragments(interval)]

def stages_from_records(records: Sequence[Tuple[str, Iterable[EntryRecord]]]) -> List[Stage]:
    return [Stage.from_records(name, entries) for (name, entries) in records]
