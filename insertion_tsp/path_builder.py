"""
Short open paths through elements that can be traversed in several ways.

This is the random-insertion heuristic for the open-path Travelling Salesman
Problem, generalized so that every element offers one or more orientations
(an entry point and an exit point each). On random inputs random insertion
lands within roughly 10% of the optimal path length while staying far cheaper
than exact or Christofides-style methods.

Usage
-----
>>> from insertion_tsp import build, segment_orientations
>>> segments = [((0, 0), (1, 0)), ((3, 0), (2, 0))]
>>> order, orientations = build(segments, segment_orientations)
"""

import logging
from typing import Any, Callable, List, NamedTuple, Optional, Sequence

import numpy as np

from .constants import SHUFFLE_SEED
from .errors import StartingPointError
from .geometry import as_point
from .insertion import best_insertion, insertion_costs, seed_orientation
from .waypoint import Waypoint, resolve_orientations

logger = logging.getLogger(__name__)

NIL = -1


class PathResult(NamedTuple):
    """Elements in path order and the chosen orientation index of each."""
    elements: List[Any]
    orientations: List[int]


def insertion_order(n: int) -> np.ndarray:
    """
    The fixed pseudo-random order in which n waypoints are inserted.

    Uses numpy's legacy RandomState (MT19937) seeded with SHUFFLE_SEED. Its
    stream is frozen by numpy's compatibility policy, so the permutation is
    the same on every platform and numpy release.
    """
    return np.random.RandomState(SHUFFLE_SEED).permutation(n)


# -------------------------
# WORKING PATH
# -------------------------
class WorkingPath:
    """
    Doubly linked sequence over an arena of waypoints.

    Waypoints are referenced by their arena index. Linking is O(1) both for
    appending and for inserting before an element already in the path. The
    entry and exit points of placed waypoints are mirrored into arena-indexed
    arrays so a whole path can be gathered with one fancy-indexing step.
    """

    def __init__(self, arena: Sequence[Waypoint]):
        n = len(arena)
        self.arena = arena
        self.head = NIL
        self.tail = NIL
        self.next = [NIL] * n
        self.prev = [NIL] * n
        self.entries = np.zeros((n, 2))
        self.exits = np.zeros((n, 2))
        self.size = 0

    def __len__(self):
        return self.size

    def __iter__(self):
        node = self.head
        while node != NIL:
            yield node
            node = self.next[node]

    def _record(self, index: int, orientation: int) -> None:
        waypoint = self.arena[index]
        waypoint.place(orientation)
        self.entries[index] = waypoint.entry
        self.exits[index] = waypoint.exit
        self.size += 1

    def append(self, index: int, orientation: int) -> None:
        self._record(index, orientation)
        self.prev[index] = self.tail
        if self.tail == NIL:
            self.head = index
        else:
            self.next[self.tail] = index
        self.tail = index

    def insert_before(self, before: int, index: int, orientation: int) -> None:
        self._record(index, orientation)
        prev = self.prev[before]
        self.prev[index] = prev
        self.next[index] = before
        self.prev[before] = index
        if prev == NIL:
            self.head = index
        else:
            self.next[prev] = index

    def order(self) -> np.ndarray:
        return np.fromiter(iter(self), dtype=np.intp, count=self.size)


# -------------------------
# PATH BUILDER
# -------------------------
class PathBuilder:
    """
    Orders elements into a short path with the random-insertion heuristic.

    Parameters
    ----------
    get_orientations : callable
        Maps one element to its orientation candidates, a non-empty sequence
        of (entry, exit) point pairs. Called exactly once per element per
        `find_path` call; must be deterministic.
    """

    def __init__(self, get_orientations: Callable[[Any], Any]):
        self.get_orientations = get_orientations

    def fill_waypoints(self, elements: Sequence[Any]) -> List[Waypoint]:
        """Wrap every element in a waypoint, caching its orientations."""
        return [
            Waypoint(element, resolve_orientations(self.get_orientations, element, index))
            for index, element in enumerate(elements)
        ]

    def find_path(self, elements: Sequence[Any], starting_point=None) -> PathResult:
        """
        Compute a short path past all elements.

        Elements are inserted in a fixed pseudo-random order, each at the
        (position, orientation) pair that lengthens the path the least. The
        result is deterministic for identical inputs.

        Parameters
        ----------
        elements : sequence
            The elements the path must visit. May be empty.
        starting_point : (x, y), optional
            Fixed point the path starts from. Without it the path may start at
            any element's entry.

        Returns
        -------
        PathResult
            The elements in path order and, for each, the index of the chosen
            orientation among the candidates of `get_orientations`.

        Raises
        ------
        OrientationError
            If an element has no candidates or they are malformed.
        StartingPointError
            If the starting point is not a finite 2D point.
        """
        start = _validate_starting_point(starting_point)
        arena = self.fill_waypoints(elements)
        if not arena:
            return PathResult([], [])

        shuffled = insertion_order(len(arena)).tolist()
        path = WorkingPath(arena)

        first = shuffled[0]
        path.append(first, seed_orientation(arena[first].orientations, start))

        for index in shuffled[1:]:
            waypoint = arena[index]
            order = path.order()
            costs = insertion_costs(waypoint.orientations, path.entries[order], path.exits[order], start)
            slot, orientation, _ = best_insertion(costs)
            if slot == len(order):
                path.append(index, orientation)
            else:
                path.insert_before(int(order[slot]), index, orientation)

        logger.debug(f"Built path through {len(arena)} elements "
                     f"({sum(len(w.orientations) for w in arena)} orientation candidates)")

        result = PathResult([], [])
        for index in path:
            result.elements.append(arena[index].element)
            result.orientations.append(arena[index].orientation_index)
        return result


def _validate_starting_point(starting_point) -> Optional[np.ndarray]:
    if starting_point is None:
        return None
    try:
        start = as_point(starting_point)
    except (TypeError, ValueError) as exc:
        raise StartingPointError(f"invalid starting point {starting_point!r}: {exc}") from exc
    if not np.all(np.isfinite(start)):
        raise StartingPointError(f"starting point must be finite, got {starting_point!r}")
    return start


def build(elements: Sequence[Any], orientation_resolver: Callable[[Any], Any], starting_point=None) -> PathResult:
    """Order `elements` into a short path; see `PathBuilder.find_path`."""
    return PathBuilder(orientation_resolver).find_path(elements, starting_point)
