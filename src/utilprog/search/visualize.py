"""Plot the utility trajectory of a fixed-point optimization run."""

from collections.abc import Sequence
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from utilprog.search.fixed_point import RoundRecord  # noqa: E402


def plot_trajectory(rounds: Sequence[RoundRecord], save_path: Path, title: str = "Utility per round") -> Path:
    """Save a line plot of utility per round with the running best.

    Args:
        rounds: Round records from ``optimize_to_fixed_point``.
        save_path: Output image path. Parent directories are created.
        title: Plot title.

    Returns:
        The path the figure was written to.

    Raises:
        ValueError: If ``rounds`` is empty.
    """
    if not rounds:
        raise ValueError("Cannot plot an empty round trajectory")
    indices = np.array([r.index for r in rounds])
    utilities = np.array([r.utility for r in rounds], dtype=np.float64)
    running_best = np.maximum.accumulate(utilities)

    plt.figure(figsize=(10, 5))
    plt.plot(indices, utilities, "o-", color="blue", linewidth=2, markersize=6, label="utility")
    plt.plot(indices, running_best, "--", color="red", linewidth=1, label="best so far")
    for r in rounds:
        plt.annotate(r.obj, (r.index, r.utility), textcoords="offset points", xytext=(0, 6), ha="center", fontsize=8)
    plt.xlabel("Round")
    plt.ylabel("Utility")
    plt.title(title)
    plt.xticks(indices)
    plt.legend()
    plt.grid(True)
    plt.tight_layout()

    save_path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(save_path, dpi=150)
    plt.close()
    return save_path
