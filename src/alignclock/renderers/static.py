"""Matplotlib static PNG renderer."""

from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from alignclock.alignment import FULL, NONE, NONE_MULTIPLE, PARTIAL, classify, sort_by_distance
from alignclock.models import Body

_BG = "#050a1a"
_STAR_COLOR = "gold"
_LIGHT_COLORS: dict[str, str] = {
    FULL: "#ffffff",
    PARTIAL: "#c9a96e",
    NONE: "#4a5568",
    NONE_MULTIPLE: "#2d3748",
}

_ROOT = Path(__file__).parent.parent.parent.parent


def render_alignment_chart(bodies: Sequence[Body], chart_size: int = 10) -> Figure:
    """Render the bodies in a line out from the star, coloured by light label.

    Args:
        bodies: Bodies in any order; they are sorted by distance.
        chart_size: Output image width in inches.

    Returns:
        matplotlib Figure object.
    """
    ordered = sort_by_distance(bodies)
    results = classify(ordered)

    fig, ax = plt.subplots(figsize=(chart_size, chart_size / 3))
    fig.patch.set_facecolor(_BG)
    ax.set_facecolor(_BG)

    ax.add_patch(Circle((0, 0), radius=0.15, color=_STAR_COLOR, zorder=2))

    distances = np.array([b.distance for b in ordered], dtype=float)
    sizes = np.array([b.size for b in ordered], dtype=float)
    max_size = sizes.max() if len(sizes) else 1.0
    marker_size = 600 * (sizes / max_size) ** 2
    colors = [_LIGHT_COLORS[r.light] for r in results]

    ax.axhline(0, color="#334466", linewidth=0.5, zorder=1)
    ax.scatter(distances, np.zeros_like(distances), s=marker_size, c=colors, zorder=3)
    for body, result, x in zip(ordered, results, distances):
        ax.annotate(
            f"{body.name}\n{result.light}",
            (x, 0),
            xytext=(0, 18),
            textcoords="offset points",
            ha="center",
            color="#dddddd",
            fontsize=8,
        )

    right = distances.max() if len(distances) else 1.0
    ax.set_xlim(-0.3, right * 1.15 + 0.1)
    ax.set_ylim(-0.5, 0.5)
    ax.axis("off")

    return fig


def save_alignment_chart(bodies: Sequence[Body], output_path: Path | None = None) -> Path:
    """Save the alignment chart as a PNG file.

    Args:
        bodies: Bodies to draw.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        output_path = _ROOT / "results" / "alignment.png"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_alignment_chart(bodies)
    fig.savefig(output_path, facecolor=_BG)
    plt.close(fig)
    return output_path
