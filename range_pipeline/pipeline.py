from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .intervals import Interval
from .tables import EntryRecord, Fragment, Stage, stages_from_records

logger = logging.getLogger(__name__)

@dataclass
class PipelineTrace:
    stage_names: List[str]
    # levels[0] is the input; levels[i+1] is the output of stage i
    levels: List[List[Fragment]]

    @property
    def final(self) -> List[Interval]:
        return [f.interval for f in self.levels[-1]]

    @property
    def fragment_counts(self) -> List[int]:
        return [len(level) for level in self.levels]

@dataclass(frozen=True)
class Pipeline:
    """Ordered chain of stages; stage i's output is stage i+1's input."""
    stages: Tuple[Stage, ...] = ()

    @staticmethod
    def from_records(records: Sequence[Tuple[str, Iterable[EntryRecord]]]) -> "Pipeline":
        return Pipeline(tuple(stages_from_records(records)))

    def __len__(self) -> int:
        return len(self.stages)

    def map_forward(self, value: int) -> int:
        for stage in self.stages:
            value = stage.forward(value)
        return value

    def map_backward(self, value: int) -> int:
        for stage in reversed(self.stages):
            value = stage.backward(value)
        return value

    def map_forward_array(self, values: np.ndarray) -> np.ndarray:
        values = np.asarray(values, dtype=np.int64)
        for stage in self.stages:
            values = stage.forward_array(values)
        return values

    def map_ranges(self, intervals: Iterable[Interval]) -> List[Interval]:
        """Fold intervals through every stage's split. No merging between stages."""
        current = list(intervals)
        for stage in self.stages:
            current = [piece for iv in current for piece in stage.split(iv)]
            logger.debug("after %s: %d intervals", stage.name, len(current))
        return current

    def trace_ranges(self, intervals: Iterable[Interval]) -> PipelineTrace:
        """Like map_ranges, but keeps every stage's tagged fragments."""
        level = [Fragment(iv, None) for iv in intervals]
        levels = [level]
        for stage in self.stages:
            level = [f for prev in level for f in stage.split_fragments(prev.interval)]
            levels.append(level)
        return PipelineTrace(stage_names=[s.name for s in self.stages], levels=levels)
