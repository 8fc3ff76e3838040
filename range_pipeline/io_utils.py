from __future__ import annotations
from typing import List, Tuple, Union
import json
import logging
from pathlib import Path

from .errors import ParseError
from .intervals import Interval
from .pipeline import Pipeline
from .seeds import SeedSet
from .tables import EntryRecord

logger = logging.getLogger(__name__)

StageRecord = Tuple[str, List[EntryRecord]]

def _ints(parts: List[str], lineno: int) -> List[int]:
    try:
        return [int(p) for p in parts]
    except ValueError:
        raise ParseError(f"line {lineno}: expected integers, got {' '.join(parts)!r}") from None

def parse_almanac(text: str) -> Tuple[List[int], List[StageRecord]]:
    """Parse 'seeds: ...' followed by '<name> map:' blocks of 'dest src len' lines."""
    seeds = None
    stages: List[StageRecord] = []
    current = None
    for lineno, ln in enumerate(text.splitlines(), start=1):
        ln = ln.strip()
        if not ln:
            current = None
            continue
        if ln.startswith("#"):
            continue
        head, sep, rest = ln.partition(":")
        if sep and head.strip() == "seeds":
            if seeds is not None:
                raise ParseError(f"line {lineno}: duplicate seeds line")
            seeds = _ints(rest.split(), lineno)
        elif sep and not rest.strip():
            current = (head.strip(), [])
            stages.append(current)
        else:
            if current is None:
                raise ParseError(f"line {lineno}: range line outside of a map block")
            nums = _ints(ln.split(), lineno)
            if len(nums) != 3:
                raise ParseError(f"line {lineno}: expected 'dest src len', got {len(nums)} numbers")
            current[1].append((nums[0], nums[1], nums[2]))
    if seeds is None:
        raise ParseError("missing 'seeds:' line")
    return seeds, stages

def parse_almanac_json(data: dict) -> Tuple[List[int], List[StageRecord]]:
    try:
        seeds = [int(v) for v in data["seeds"]]
        stages = [
            (str(st["name"]), [(int(d), int(s), int(n)) for (d, s, n) in st["entries"]])
            for st in data.get("stages", [])
        ]
    except (KeyError, TypeError, ValueError) as e:
        raise ParseError(f"malformed almanac json: {e}") from e
    return seeds, stages

def load_almanac(path: Union[str, Path], mode: str = "ranges") -> Tuple[SeedSet, Pipeline]:
    p = Path(path)
    if p.suffix.lower() == ".json":
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ParseError(f"{p}: {e}") from e
        numbers, records = parse_almanac_json(data)
    else:
        numbers, records = parse_almanac(p.read_text(encoding="utf-8"))
    seeds = SeedSet.from_numbers(numbers, mode)
    pipeline = Pipeline.from_records(records)
    logger.debug("loaded %s: %d seed intervals, %d stages", p, len(seeds), len(pipeline))
    return seeds, pipeline

def save_intervals_json(spans: List[Interval], path: Union[str, Path]):
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump([[int(iv.start), int(iv.end)] for iv in spans], f, ensure_ascii=False, indent=2)
