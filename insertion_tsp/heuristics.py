import numpy as np
from hilbertcurve.hilbertcurve import HilbertCurve
import zCurve as z

from .geometry import distances, midpoint

# -------------------------
# PATH COST
# -------------------------
def compute_path_cost(candidates, order, orientations, starting_point=None) -> float:
    """
    Travel length of an oriented path.

    `candidates[i]` is the (k_i, 2, 2) orientation array of element i, `order`
    lists element indices in path order and `orientations[j]` is the chosen
    orientation of the j-th element of the path. Only the moves between
    elements count (exit of one to entry of the next), plus the move from the
    starting point to the first entry when given. The traversal of each
    element itself is the same whatever the order, so it is left out.
    """
    order = list(order)
    if not order:
        return 0.0
    entries = np.array([candidates[i][o, 0] for i, o in zip(order, orientations)])
    exits = np.array([candidates[i][o, 1] for i, o in zip(order, orientations)])
    cost = float(np.sum(distances(exits[:-1], entries[1:])))
    if starting_point is not None:
        cost += float(distances(entries[0], np.asarray(starting_point, dtype=float)))
    return cost


def orient_greedily(candidates, order, starting_point=None) -> np.ndarray:
    """
    Fix the order and pick each element's orientation greedily: the one whose
    entry is nearest to where the previous element was left. The first element
    uses orientation 0 unless a starting point is given.
    """
    orientations = np.zeros(len(order), dtype=int)
    position = None if starting_point is None else np.asarray(starting_point, dtype=float)
    for j, i in enumerate(order):
        cand = candidates[i]
        if position is not None:
            orientations[j] = int(np.argmin(distances(cand[:, 0], position)))
        position = cand[orientations[j], 1]
    return orientations


def element_midpoints(candidates) -> np.ndarray:
    """One representative point per element: the middle of its first orientation."""
    return np.array([midpoint(c[0, 0], c[0, 1]) for c in candidates]).reshape(-1, 2)


def normalize_to_unit_square(points: np.ndarray) -> np.ndarray:
    """Scale points uniformly into [0,1]^2, keeping the aspect ratio."""
    points = np.asarray(points, dtype=float)
    if len(points) == 0:
        return points
    lo = points.min(axis=0)
    span = float(np.max(points.max(axis=0) - lo))
    if span == 0:
        return np.zeros_like(points)
    return (points - lo) / span


# -------------------------
# HILBERT ORDER
# -------------------------
def hilbert_order(points: np.ndarray, p: int = 10):
    """
    Order points by their distance along a 2D Hilbert curve of order p.
    Points are first scaled into the unit square.
    Returns (indices, codes).
    """
    n = 2
    hilbert_curve = HilbertCurve(p, n)
    R = 2 ** p
    unit = normalize_to_unit_square(points)

    def point_to_index(pt):
        x_int = min(R - 1, max(0, int(pt[0] * R)))
        y_int = min(R - 1, max(0, int(pt[1] * R)))
        return hilbert_curve.distance_from_point([x_int, y_int])

    hilbert_indices = [point_to_index(pt) for pt in unit]
    return np.argsort(hilbert_indices, kind="stable"), hilbert_indices


# -------------------------
# Z-CURVE (MORTON ORDER)
# -------------------------
def zcurve_order(points: np.ndarray, bits: int = 16):
    """
    Order points by Z-curve (Morton code).
    Points are first scaled into the unit square.
    Returns (indices, morton_codes).
    """
    R = 2 ** bits
    unit = normalize_to_unit_square(points)
    if len(unit) == 0:
        return np.array([], dtype=int), []

    int_points = [
        (min(R - 1, max(0, int(x * R))),
         min(R - 1, max(0, int(y * R))))
        for x, y in unit
    ]
    morton_codes = [z.interlace(x, y, dims=2, bits_per_dim=bits) for x, y in int_points]
    return np.argsort(morton_codes, kind="stable"), morton_codes


# -------------------------
# BASELINE PATHS
# -------------------------
def curve_path(candidates, order_fn, starting_point=None):
    """
    Baseline path: order elements by a space-filling curve over their
    midpoints, then orient them greedily. Returns (order, orientations).
    """
    if len(candidates) == 0:
        return np.array([], dtype=int), np.array([], dtype=int)
    order, _ = order_fn(element_midpoints(candidates))
    order = np.asarray(order, dtype=int)
    return order, orient_greedily(candidates, order, starting_point)


# === Accessible heuristics ===
heuristics_registry_dict = {
    "Hilbert": hilbert_order,
    "Z-order": zcurve_order,
}
