# plotting.py
import numpy as np
from matplotlib.figure import Figure
from matplotlib.collections import LineCollection


# ============================================================
# Path drawing
# ============================================================
def plot_path(candidates, order, orientations, starting_point=None, ax=None, title=None):
    """
    Draw an oriented path on a Matplotlib Axes.

    - every element's chosen traversal (entry -> exit) in blue
    - travel moves between consecutive elements dashed in red
    - entries as dots, the starting point (if any) as a green star

    Returns the Axes (a new Figure is created when `ax` is None).
    """
    if ax is None:
        fig = Figure(figsize=(7, 7), dpi=100)
        ax = fig.add_subplot(111)

    order = list(order)
    entries = np.array([candidates[i][o, 0] for i, o in zip(order, orientations)]).reshape(-1, 2)
    exits = np.array([candidates[i][o, 1] for i, o in zip(order, orientations)]).reshape(-1, 2)

    traversals = np.stack([entries, exits], axis=1)
    ax.add_collection(LineCollection(traversals, colors="blue", linewidths=2, label="elements"))

    moves = [(exits[j], entries[j + 1]) for j in range(len(order) - 1)]
    if starting_point is not None and len(order):
        moves.insert(0, (np.asarray(starting_point, dtype=float), entries[0]))
    if moves:
        ax.add_collection(LineCollection(np.array(moves), colors="red", linewidths=1,
                                         linestyles="dashed", label="travel"))

    if len(order):
        ax.scatter(entries[:, 0], entries[:, 1], s=12, color="black", zorder=3)
    if starting_point is not None:
        ax.scatter([starting_point[0]], [starting_point[1]], s=120, marker="*",
                   color="green", zorder=4, label="start")

    ax.set_aspect("equal")
    ax.autoscale_view()
    if title:
        ax.set_title(title)
    ax.legend(loc="upper right")
    return ax


def save_path_plot(filename, candidates, order, orientations, starting_point=None, title=None):
    """Render a path to an image file (format from the extension)."""
    fig = Figure(figsize=(7, 7), dpi=100)
    ax = fig.add_subplot(111)
    plot_path(candidates, order, orientations, starting_point=starting_point, ax=ax, title=title)
    fig.savefig(filename, bbox_inches="tight")
    return filename
