"""Tests for range_pipeline.plotting."""

from range_pipeline import Pipeline, plot_trace


def test_plot_trace_saves_png(tmp_path, sample_pipeline, sample_seeds):
    trace = sample_pipeline.trace_ranges(sample_seeds)
    path = tmp_path / "trace.png"
    plot_trace(trace, title="sample", show=False, save_path=str(path))
    assert path.exists()
    assert path.stat().st_size > 0


def test_plot_trace_empty_pipeline(tmp_path, sample_seeds):
    trace = Pipeline().trace_ranges(sample_seeds)
    path = tmp_path / "empty.png"
    plot_trace(trace, show=False, save_path=str(path))
    assert path.exists()
