from dataclasses import dataclass, field
from typing import Literal
import yaml

@dataclass
class SeedParams:
    mode: Literal["ranges", "points"] = "ranges"  # how the flat seed list is read

@dataclass
class VerifyParams:
    enabled: bool = True
    scan_limit: int = 10_000_000  # skip the backward scan above this answer

@dataclass
class ForwardScanParams:
    enabled: bool = False
    max_elements: int = 5_000_000
    chunk_size: int = 1_000_000

@dataclass
class SolverConfig:
    workers: int = 1
    log_level: str = "WARNING"
    seeds: SeedParams = field(default_factory=SeedParams)
    verify: VerifyParams = field(default_factory=VerifyParams)
    forward_scan: ForwardScanParams = field(default_factory=ForwardScanParams)

def load_config_yaml(path: str) -> SolverConfig:
    """Load config from a YAML file into SolverConfig dataclasses."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    def merge_dataclass(dc_cls, values):
        obj = dc_cls()
        for k, v in (values or {}).items():
            if hasattr(obj, k):
                setattr(obj, k, v)
        return obj

    return SolverConfig(
        workers=int(data.get("workers", 1)),
        log_level=str(data.get("log_level", "WARNING")),
        seeds=merge_dataclass(SeedParams, data.get("seeds")),
        verify=merge_dataclass(VerifyParams, data.get("verify")),
        forward_scan=merge_dataclass(ForwardScanParams, data.get("forward_scan")),
    )
