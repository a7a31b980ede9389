import os
from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np

from .models import CUT, RAPID, ToolpathSegment


def _collect_lines(segments: List[ToolpathSegment], kind: str) -> np.ndarray:
    """Stack segments of one kind into an (n, 2, 2) array of endpoints."""
    lines = [
        [[s.start.x, s.start.y], [s.end.x, s.end.y]]
        for s in segments if s.kind == kind
    ]
    return np.array(lines, dtype=float).reshape(-1, 2, 2)


def plot_toolpath_preview(segments: List[ToolpathSegment], output_file: Optional[str] = None,
                          dpi: int = 150, font_size: int = 8, upto: Optional[int] = None, show: bool = True):
    """
    Plot rapid and cutting moves of a generated program.

    Args:
        segments: Toolpath segments in execution order
        output_file: Optional path to save the plot
        dpi: Plot resolution
        font_size: Font size for labels
        upto: Only draw the first `upto` segments (progressive reveal)
        show: Display the window after drawing

    Returns:
        The matplotlib Figure
    """
    if upto is not None:
        segments = segments[:upto]

    fig, ax = plt.subplots(figsize=(10, 8), dpi=dpi)

    cuts = _collect_lines(segments, CUT)
    rapids = _collect_lines(segments, RAPID)

    for i, line in enumerate(cuts):
        ax.plot(line[:, 0], line[:, 1], color='red', linewidth=1.5,
                label="Cut (G01)" if i == 0 else "")
    for i, line in enumerate(rapids):
        ax.plot(line[:, 0], line[:, 1], color='green', linewidth=1, linestyle='--',
                label="Rapid (G00)" if i == 0 else "")

    ax.plot(0, 0, 'k+', markersize=10, markeredgewidth=2)

    ax.set_xlabel("X-axis (mm)", fontsize=font_size + 2)
    ax.set_ylabel("Y-axis (mm)", fontsize=font_size + 2)
    ax.set_title("CNC Toolpath Preview", fontsize=font_size + 4)
    if len(cuts) or len(rapids):
        ax.legend(fontsize=font_size)
    ax.grid(True, alpha=0.3)
    ax.set_aspect('equal', adjustable='datalim')
    ax.margins(0.1)

    stats_text = f"{len(cuts)} cut moves\n{len(rapids)} rapid moves"
    ax.text(0.02, 0.02, stats_text, transform=ax.transAxes,
            fontsize=font_size, verticalalignment='bottom', horizontalalignment='left',
            bbox=dict(boxstyle="round,pad=0.5", facecolor="lightblue", alpha=0.8))

    plt.tight_layout()

    if output_file:
        plt.savefig(output_file, dpi=dpi, bbox_inches='tight')

    if show:
        plt.show()

    return fig


def save_plot_preview(segments: List[ToolpathSegment], base_filename: str, output_dir: str = "output") -> str:
    """
    Save a plot preview to the output directory without displaying it.

    Args:
        segments: Toolpath segments
        base_filename: Base name for the output file (without extension)
        output_dir: Directory for the PNG

    Returns:
        Path of the saved image
    """
    os.makedirs(output_dir, exist_ok=True)
    plot_filename = os.path.join(output_dir, f"{base_filename}_preview.png")

    fig = plot_toolpath_preview(segments, plot_filename, show=False)
    plt.close(fig)

    return plot_filename
