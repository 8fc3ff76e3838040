from .errors import (
    RangePipelineError, ValidationError, EmptyDomainError, ScanLimitError, ParseError, StrategyMismatchError
)
from .config import SeedParams, VerifyParams, ForwardScanParams, SolverConfig, load_config_yaml
from .intervals import Interval, normalize_intervals, total_length
from .tables import RangeEntry, Stage, Fragment
from .seeds import SeedSet
from .pipeline import Pipeline, PipelineTrace
from .solver import Solver, SolveResult, lowest_value
from .plotting import plot_trace
from .io_utils import parse_almanac, parse_almanac_json, load_almanac, save_intervals_json
