#!/usr/bin/env python3
import argparse, json, logging, sys
from pathlib import Path

from range_pipeline import (
    SolverConfig, load_config_yaml, Solver, RangePipelineError, load_almanac,
    normalize_intervals, save_intervals_json, plot_trace
)

logger = logging.getLogger("range_pipeline.cli")

def build_argparser():
    ap = argparse.ArgumentParser(description="Minimum reachable value through a chain of range tables")
    ap.add_argument("almanac", type=str, help="Almanac file (text, or .json)")
    ap.add_argument("--config", type=str, default="", help="YAML config file (optional)")
    ap.add_argument("--points", action="store_true", help="Read seeds as single values instead of (start, length) pairs")
    ap.add_argument("--strategy", choices=["intervals", "backward", "forward"], default="intervals",
                    help="intervals runs the cross-checked solve; the others run one strategy alone")
    ap.add_argument("--no-verify", action="store_true", help="Skip the backward-scan cross-check")
    ap.add_argument("--forward-scan", action="store_true", help="Also cross-check with a full forward scan")
    ap.add_argument("--workers", type=int, default=0, help="Threads for interval propagation (overrides config)")
    ap.add_argument("--output-dir", type=str, default="outputs", help="Directory to store results")
    ap.add_argument("--write-fragments", action="store_true", help="Save final fragments as JSON")
    ap.add_argument("--plot", action="store_true", help="Show the propagation plot interactively")
    ap.add_argument("--save-plots", action="store_true", help="Save the propagation plot as PNG in output-dir")
    ap.add_argument("--log-level", type=str, default="", help="Logging level (overrides config)")
    return ap

def run(args) -> dict:
    cfg = load_config_yaml(args.config) if args.config else SolverConfig()
    if args.points:
        cfg.seeds.mode = "points"
    if args.no_verify:
        cfg.verify.enabled = False
    if args.forward_scan:
        cfg.forward_scan.enabled = True
    if args.workers > 0:
        cfg.workers = args.workers
    if args.log_level:
        cfg.log_level = args.log_level
    logging.basicConfig(level=cfg.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    out_dir = Path(args.output_dir); out_dir.mkdir(parents=True, exist_ok=True)
    seeds, pipeline = load_almanac(args.almanac, cfg.seeds.mode)
    solver = Solver(cfg)

    verified = False
    fragments = None
    if args.strategy == "backward":
        minimum = solver.backward_scan(pipeline, seeds)
    elif args.strategy == "forward":
        minimum = solver.forward_scan(pipeline, seeds)
    else:
        res = solver.solve(pipeline, seeds)
        minimum, verified, fragments = res.minimum, res.verified, res.fragments

    if args.write_fragments or args.plot or args.save_plots:
        trace = pipeline.trace_ranges(seeds)
        if args.write_fragments:
            save_intervals_json(trace.final, out_dir / "fragments.json")
            save_intervals_json(normalize_intervals(trace.final), out_dir / "fragments_merged.json")
        if args.plot or args.save_plots:
            plot_trace(
                trace,
                title=f"{Path(args.almanac).name}: minimum {minimum}",
                show=args.plot,
                save_path=str(out_dir / "plot_trace.png") if args.save_plots else None,
            )

    summary = {
        "minimum": int(minimum),
        "strategy": args.strategy,
        "stages": len(pipeline),
        "seed_intervals": len(seeds),
        "fragments": fragments,
        "verified": verified,
    }
    (out_dir / "summary.json").write_text(json.dumps(summary, indent=2, ensure_ascii=False), encoding="utf-8")
    return summary

def main(argv=None):
    args = build_argparser().parse_args(argv)
    try:
        summary = run(args)
    except (RangePipelineError, OSError) as e:
        logger.error("%s", e)
        return 1
    print(json.dumps(summary))
    return 0

if __name__ == "__main__":
    sys.exit(main())
