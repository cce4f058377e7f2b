import numpy as np

from .errors import OrientationError


def orientation_array(candidates, index) -> np.ndarray:
    """
    Normalize the orientation candidates of one element.

    Accepts any sequence of (entry, exit) pairs and returns a float array of
    shape (k, 2, 2) with k >= 1. `index` is the element's position in the
    caller's input and only appears in error messages.
    """
    try:
        arr = np.asarray(candidates, dtype=float)
    except (TypeError, ValueError) as exc:
        raise OrientationError(index, f"candidates are not numeric pairs of points ({exc})") from exc

    if arr.size == 0:
        raise OrientationError(index, "no orientation candidates")
    if arr.ndim != 3 or arr.shape[1:] != (2, 2):
        raise OrientationError(index, f"expected candidates of shape (k, 2, 2), got {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise OrientationError(index, "candidates contain non-finite coordinates")
    return arr


def resolve_orientations(get_orientations, element, index) -> np.ndarray:
    """Call the resolver on one element; its errors are reported with `index`."""
    try:
        candidates = get_orientations(element)
    except OrientationError:
        raise
    except (TypeError, ValueError, IndexError) as exc:
        raise OrientationError(index, f"cannot resolve orientations ({exc})") from exc
    return orientation_array(candidates, index)


class Waypoint:
    """
    One element of the path together with the ways it can be traversed.

    `orientations[i, 0]` is where the element is entered in orientation i and
    `orientations[i, 1]` where it is left. `orientation_index` stays None until
    the waypoint is placed in the working path; it is written exactly once.
    """

    __slots__ = ("element", "orientations", "orientation_index")

    def __init__(self, element, orientations: np.ndarray):
        self.element = element
        self.orientations = orientations
        self.orientation_index = None

    @property
    def placed(self) -> bool:
        return self.orientation_index is not None

    def place(self, orientation_index: int) -> None:
        assert not self.placed, "waypoint placed twice"
        assert 0 <= orientation_index < len(self.orientations), "orientation index out of range"
        self.orientation_index = int(orientation_index)

    @property
    def entry(self) -> np.ndarray:
        assert self.placed, "entry of an unplaced waypoint"
        return self.orientations[self.orientation_index, 0]

    @property
    def exit(self) -> np.ndarray:
        assert self.placed, "exit of an unplaced waypoint"
        return self.orientations[self.orientation_index, 1]

    def __repr__(self):
        return f"Waypoint({self.element!r}, k={len(self.orientations)}, orientation={self.orientation_index})"
