"""End-to-end tests for cli.main."""

import json

import cli


def run_cli(capsys, *argv):
    code = cli.main([str(a) for a in argv])
    out = capsys.readouterr().out
    return code, (json.loads(out) if code == 0 else None)


def test_default_run(capsys, sample_file, tmp_path):
    out_dir = tmp_path / "out"
    code, summary = run_cli(capsys, sample_file, "--output-dir", out_dir)
    assert code == 0
    assert summary["minimum"] == 46
    assert summary["strategy"] == "intervals"
    assert summary["stages"] == 7
    assert summary["seed_intervals"] == 2
    assert summary["verified"] is True
    assert json.loads((out_dir / "summary.json").read_text(encoding="utf-8")) == summary


def test_points_mode(capsys, sample_file, tmp_path):
    code, summary = run_cli(capsys, sample_file, "--points", "--forward-scan", "--output-dir", tmp_path)
    assert code == 0
    assert summary["minimum"] == 35
    assert summary["seed_intervals"] == 4


def test_single_strategies(capsys, sample_file, tmp_path):
    for strategy in ("backward", "forward"):
        code, summary = run_cli(capsys, sample_file, "--strategy", strategy, "--output-dir", tmp_path)
        assert code == 0
        assert summary["minimum"] == 46
        assert summary["verified"] is False


def test_config_file(capsys, sample_file, tmp_path):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("seeds:\n  mode: points\nverify:\n  enabled: false\n", encoding="utf-8")
    code, summary = run_cli(capsys, sample_file, "--config", cfg, "--workers", 2, "--output-dir", tmp_path)
    assert code == 0
    assert summary["minimum"] == 35
    assert summary["verified"] is False


def test_writes_fragments_and_plot(capsys, sample_file, tmp_path):
    code, _ = run_cli(capsys, sample_file, "--write-fragments", "--save-plots", "--output-dir", tmp_path)
    assert code == 0
    spans = json.loads((tmp_path / "fragments.json").read_text(encoding="utf-8"))
    assert sum(e - s for s, e in spans) == 27
    assert min(s for s, _ in spans) == 46
    assert (tmp_path / "fragments_merged.json").exists()
    assert (tmp_path / "plot_trace.png").exists()


def test_errors_exit_nonzero(capsys, tmp_path):
    bad = tmp_path / "bad.txt"
    bad.write_text("no seeds here\n", encoding="utf-8")
    assert run_cli(capsys, bad, "--output-dir", tmp_path)[0] == 1
    assert run_cli(capsys, tmp_path / "missing.txt", "--output-dir", tmp_path)[0] == 1
