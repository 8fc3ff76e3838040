"""Tests for range_pipeline.config."""

from range_pipeline import SolverConfig, load_config_yaml


def test_defaults():
    cfg = SolverConfig()
    assert cfg.workers == 1
    assert cfg.seeds.mode == "ranges"
    assert cfg.verify.enabled
    assert not cfg.forward_scan.enabled


def test_defaults_are_not_shared():
    a, b = SolverConfig(), SolverConfig()
    a.verify.enabled = False
    assert b.verify.enabled


def test_load_partial_yaml(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text(
        "workers: 3\n"
        "seeds:\n  mode: points\n"
        "verify:\n  scan_limit: 500\n  bogus: 1\n"
        "forward_scan:\n  enabled: true\n",
        encoding="utf-8",
    )
    cfg = load_config_yaml(str(path))
    assert cfg.workers == 3
    assert cfg.log_level == "WARNING"
    assert cfg.seeds.mode == "points"
    assert cfg.verify.enabled
    assert cfg.verify.scan_limit == 500
    assert not hasattr(cfg.verify, "bogus")
    assert cfg.forward_scan.enabled
    assert cfg.forward_scan.max_elements == 5_000_000


def test_load_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config_yaml(str(path)) == SolverConfig()
