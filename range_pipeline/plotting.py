from __future__ import annotations
from typing import Optional
import matplotlib.pyplot as plt

from .pipeline import PipelineTrace

def plot_trace(
    trace: PipelineTrace,
    title: str = "",
    show: bool = True,
    save_path: Optional[str] = None,
):
    """Plot each level's fragments as horizontal bars, input on top.
    Mapped fragments and pass-through fragments get different colors.
    """
    labels = ["input"] + trace.stage_names
    fig, ax = plt.subplots(figsize=(12, 0.6 * len(labels) + 1.5))
    for row, level in enumerate(trace.levels):
        y = len(labels) - 1 - row
        mapped = [(f.interval.start, f.interval.length) for f in level if f.mapped]
        passed = [(f.interval.start, f.interval.length) for f in level if not f.mapped]
        if mapped:
            ax.broken_barh(mapped, (y - 0.35, 0.7), facecolors="tab:blue", alpha=0.6, label="mapped")
        if passed:
            ax.broken_barh(passed, (y - 0.35, 0.7), facecolors="tab:gray", alpha=0.6, label="pass-through")
    ax.set_yticks(range(len(labels)))
    ax.set_yticklabels(list(reversed(labels)), fontsize=8)
    ax.set_title(title)
    ax.set_xlabel("Value")
    handles, names = ax.get_legend_handles_labels()
    # Deduplicate labels
    uniq = dict(zip(names, handles))
    if uniq:
        ax.legend(uniq.values(), uniq.keys(), loc="upper right", fontsize=8, framealpha=0.3)
    fig.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")
    if show:
        plt.show()
    plt.close(fig)
