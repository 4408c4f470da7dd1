"""Scatter plot of candidate scores. Requires the ``plot`` extra (matplotlib)."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from .models import CandidateResult  # noqa: E402


def marker_sizes(results: Sequence[CandidateResult]) -> list[float]:
    counts = [result.count for result in results]
    low, high = min(counts, default=0), max(counts, default=1)
    spread = (high - low) or 1
    return [5.0 + 30.0 * (count - low) / spread for count in counts]


def marker_colors(results: Sequence[CandidateResult]) -> list[tuple[float, float, float, float]]:
    high = max((result.count for result in results), default=1) or 1
    colors = []
    for result in results:
        intensity = result.count / high
        colors.append((0.0, intensity, 0.0, intensity))
    return colors


def plot_candidates(results: Sequence[CandidateResult], seed: int, path: str | Path) -> Path:
    """Write a scatter of every candidate, sized and shaded by its slime chunk count."""
    target = Path(path).expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(10.8, 10.8), dpi=100)
    try:
        ax.scatter(
            [result.center.x for result in results],
            [result.center.z for result in results],
            s=marker_sizes(results),
            c=marker_colors(results),
            linewidths=0,
        )
        ax.set_title(f"Slime Chunks at {seed}")
        ax.set_xlabel("Chunk X")
        ax.set_ylabel("Chunk Z")
        ax.set_aspect("equal")
        fig.savefig(target)
    finally:
        plt.close(fig)
    return target
