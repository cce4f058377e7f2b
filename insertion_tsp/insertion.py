"""
Insertion-cost evaluation for the random-insertion heuristic.

A working path of m placed elements has m + 1 slots where a new element can
go. Slot r means "insert before path element r"; slot m means "append after
the last element". For every slot and every orientation of the new element
the cost is the marginal increase of the path length:

    front (slot 0):      d(start, entry) + d(exit, first.entry)
                         (the first term is 0 without a starting point)
    middle (0 < r < m):  d(prev.exit, entry) + d(exit, next.entry)
                         - d(prev.exit, next.entry)
    back (slot m):       d(last.exit, entry)
"""

import numpy as np

from .geometry import distances


def seed_orientation(candidates: np.ndarray, starting_point=None) -> int:
    """
    Orientation of the first element placed in an empty path.

    Without a starting point nothing constrains the choice, so orientation 0
    is used. With one, the orientation whose entry is nearest the starting
    point wins; ties keep the lowest index.
    """
    if starting_point is None:
        return 0
    return int(np.argmin(distances(candidates[:, 0], starting_point)))


def insertion_costs(candidates: np.ndarray,
                    path_entries: np.ndarray,
                    path_exits: np.ndarray,
                    starting_point=None) -> np.ndarray:
    """
    Cost of inserting one element at every slot of a non-empty path.

    Parameters
    ----------
    candidates : ndarray of shape (k, 2, 2)
        Orientation candidates of the element being inserted.
    path_entries, path_exits : ndarray of shape (m, 2)
        Entry and exit points of the placed elements, in path order, using
        their chosen orientations.
    starting_point : ndarray of shape (2,), optional
        Fixed point acting as a predecessor of the first path element.

    Returns
    -------
    costs : ndarray of shape (m + 1, k)
        costs[r, i] is the marginal cost of slot r in orientation i. Rows are
        in scan order: front, middle slots left to right, back.
    """
    assert len(path_entries) >= 1, "insertion into an empty path"
    entries = candidates[:, 0]
    exits = candidates[:, 1]

    front = distances(exits, path_entries[0])
    if starting_point is not None:
        front = front + distances(entries, starting_point)

    back = distances(entries, path_exits[-1])

    prev_exits = path_exits[:-1, None, :]     # (m - 1, 1, 2)
    next_entries = path_entries[1:, None, :]  # (m - 1, 1, 2)
    removed = distances(path_exits[:-1], path_entries[1:])[:, None]
    middle = distances(prev_exits, entries[None]) + distances(exits[None], next_entries) - removed

    return np.vstack([front[None, :], middle, back[None, :]])


def best_insertion(costs: np.ndarray):
    """
    Pick the cheapest (slot, orientation) pair from an insertion cost matrix.

    argmin returns the first minimum in row-major order, which is the scan
    order of the slots with orientations ascending inside each slot, so equal
    costs resolve to the earliest candidate.

    Returns (slot, orientation, cost).
    """
    flat = int(np.argmin(costs))
    slot, orientation = divmod(flat, costs.shape[1])
    return slot, orientation, float(costs[slot, orientation])
