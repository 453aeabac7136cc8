from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt


def _annotate_bars(ax, xs, bottoms, heights, fontsize=8):
    """
    Write the bucket count in the middle of each non-empty bar segment.

    Args:
        ax: matplotlib Axes
        xs: x coordinates of the bars
        bottoms: lower edge of each segment
        heights: segment heights
        fontsize: font size for annotations
    """
    for x, b, h in zip(xs, bottoms, heights):
        if h <= 0:
            continue
        ax.annotate(
            f"{int(h)}",
            (x, b + h / 2),
            ha="center",
            va="center",
            fontsize=fontsize,
        )


def compute_history_stats(history, code_length: int):
    """
    Returns:
      attempts (np.ndarray) attempt numbers starting at 1
      well_placed (np.ndarray) well placed count per attempt
      misplaced (np.ndarray) misplaced count per attempt
      absent (np.ndarray) remaining slots per attempt
    """
    feedback = np.array([fb for _, fb in history], dtype=np.int32).reshape(-1, 2)
    well_placed = feedback[:, 0]
    misplaced = feedback[:, 1]
    absent = code_length - well_placed - misplaced
    attempts = np.arange(1, len(feedback) + 1)
    return attempts, well_placed, misplaced, absent


def plot_feedback_history(history, code_length: int, out_path):
    """
    Save a stacked bar chart of one game's feedback.

    Args:
        history: list of (guess, (well_placed, misplaced)) as returned by
            Board.get_feedback_history()
        code_length: number of colors in the secret
        out_path: PNG file to write
    Returns:
        Path: the written file
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    attempts, well_placed, misplaced, absent = compute_history_stats(
        history, code_length
    )

    plt.figure(figsize=(10, 6))
    ax = plt.gca()
    ax.bar(attempts, well_placed, color="tab:green", label="Well placed")
    ax.bar(attempts, misplaced, bottom=well_placed, color="gold", label="Misplaced")
    ax.bar(attempts, absent, bottom=well_placed + misplaced,
           color="tab:red", label="Not in secret")

    _annotate_bars(ax, attempts, np.zeros_like(well_placed), well_placed)
    _annotate_bars(ax, attempts, well_placed, misplaced)
    _annotate_bars(ax, attempts, well_placed + misplaced, absent)

    plt.title(f"Feedback per attempt ({code_length} colors)")
    plt.xlabel("Attempt")
    plt.ylabel("Colors")
    if len(attempts):
        plt.xticks(attempts)
    plt.yticks(np.arange(0, code_length + 1))
    plt.grid(True, axis="y")
    plt.legend()
    plt.savefig(out_path, dpi=200, bbox_inches="tight")
    plt.close()
    return out_path
