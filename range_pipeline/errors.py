from typing import Optional


class RangePipelineError(Exception):
    """Base class for all errors raised by range_pipeline."""


class ValidationError(RangePipelineError):
    pass


class EmptyDomainError(RangePipelineError):
    pass


class ScanLimitError(RangePipelineError):
    pass


class ParseError(RangePipelineError):
    pass


class StrategyMismatchError(RangePipelineError):
    """Two solving strategies produced different minima."""

    def __init__(self, expected: int, actual: Optional[int], strategy: str):
        self.expected = expected
        self.actual = actual
        self.strategy = strategy
        if actual is None:
            msg = f"{strategy} found no value up to {expected}, interval propagation returned {expected}"
        else:
            msg = f"{strategy} returned {actual}, interval propagation returned {expected}"
        super().__init__(msg)
