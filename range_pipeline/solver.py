"""Minimum reachable value of a seed set through a pipeline.

Three strategies:
    interval_propagation -- split seed intervals stage by stage (primary path)
    backward_scan        -- walk candidate outputs 0, 1, 2, ... back to the seeds
    forward_scan         -- push every seed element forward (numpy, small inputs)

solve() runs the primary path and cross-checks it against the others
according to SolverConfig.
"""
from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from .config import SolverConfig
from .errors import EmptyDomainError, ScanLimitError, StrategyMismatchError
from .intervals import Interval
from .pipeline import Pipeline
from .seeds import SeedSet

logger = logging.getLogger(__name__)

@dataclass
class SolveResult:
    minimum: int
    strategies: Dict[str, int] = field(default_factory=dict)
    fragments: int = 0
    verified: bool = False

def _require_domain(seeds: SeedSet):
    if seeds.total_length == 0:
        raise EmptyDomainError("seed set has no elements, no minimum exists")

class Solver:
    def __init__(self, config: Optional[SolverConfig] = None):
        self.cfg = config or SolverConfig()

    def propagate(self, pipeline: Pipeline, seeds: SeedSet) -> List[Interval]:
        """Final fragments for all seeds. Seeds run on separate threads when workers > 1."""
        workers = max(1, int(self.cfg.workers))
        if workers == 1 or len(seeds) < 2:
            return pipeline.map_ranges(seeds)
        with ThreadPoolExecutor(max_workers=min(workers, len(seeds))) as pool:
            parts = list(pool.map(lambda iv: pipeline.map_ranges([iv]), seeds))
        return [iv for part in parts for iv in part]

    def interval_propagation(self, pipeline: Pipeline, seeds: SeedSet) -> int:
        _require_domain(seeds)
        final = self.propagate(pipeline, seeds)
        return min(iv.start for iv in final if not iv.empty)

    def _scan_backward(self, pipeline: Pipeline, seeds: SeedSet, start: int, max_value: Optional[int]) -> Optional[int]:
        value = start
        while max_value is None or value <= max_value:
            if seeds.contains(pipeline.map_backward(value)):
                return value
            value += 1
        return None

    def backward_scan(self, pipeline: Pipeline, seeds: SeedSet, start: int = 0, max_value: Optional[int] = None) -> int:
        """First output value >= start whose preimage lies in the seeds.
        Cost grows with the answer; unbounded unless max_value is given.
        """
        _require_domain(seeds)
        found = self._scan_backward(pipeline, seeds, start, max_value)
        if found is None:
            raise ScanLimitError(f"no seed reaches any value in [{start}, {max_value}]")
        return found

    def forward_scan(self, pipeline: Pipeline, seeds: SeedSet) -> int:
        """Map every seed element forward and take the minimum."""
        _require_domain(seeds)
        params = self.cfg.forward_scan
        if seeds.total_length > params.max_elements:
            raise ScanLimitError(
                f"forward scan over {seeds.total_length} elements exceeds max_elements={params.max_elements}"
            )
        chunk = max(1, int(params.chunk_size))
        best = None
        for iv in seeds:
            for lo in range(iv.start, iv.end, chunk):
                hi = min(iv.end, lo + chunk)
                m = int(pipeline.map_forward_array(np.arange(lo, hi, dtype=np.int64)).min())
                best = m if best is None else min(best, m)
        return best

    def solve(self, pipeline: Pipeline, seeds: SeedSet) -> SolveResult:
        _require_domain(seeds)
        final = self.propagate(pipeline, seeds)
        minimum = min(iv.start for iv in final if not iv.empty)
        res = SolveResult(minimum=minimum, strategies={"intervals": minimum}, fragments=len(final))
        logger.info("interval propagation: minimum=%d over %d fragments", minimum, len(final))

        vcfg = self.cfg.verify
        if vcfg.enabled:
            if 0 <= minimum <= vcfg.scan_limit:
                found = self._scan_backward(pipeline, seeds, 0, minimum)
                if found != minimum:
                    raise StrategyMismatchError(minimum, found, "backward scan")
                res.strategies["backward"] = found
                res.verified = True
            else:
                logger.info("skipping backward scan: minimum %d outside [0, %d]", minimum, vcfg.scan_limit)

        if self.cfg.forward_scan.enabled:
            fwd = self.forward_scan(pipeline, seeds)
            if fwd != minimum:
                raise StrategyMismatchError(minimum, fwd, "forward scan")
            res.strategies["forward"] = fwd
            res.verified = True
        return res

def lowest_value(pipeline: Pipeline, seeds: SeedSet) -> int:
    """Minimum reachable final value via interval propagation."""
    return Solver().interval_propagation(pipeline, seeds)
