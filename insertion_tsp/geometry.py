import numpy as np
from math import cos, sin, pi

# -------------------------
# 1. POINTS AND DISTANCES
# -------------------------
def as_point(p) -> np.ndarray:
    """Convert an (x, y) pair to a float array of shape (2,)."""
    arr = np.asarray(p, dtype=float)
    if arr.shape != (2,):
        raise ValueError(f"expected a 2D point, got shape {arr.shape}")
    return arr

def distance(a, b) -> float:
    """Euclidean distance between two 2D points."""
    return float(np.linalg.norm(np.subtract(a, b, dtype=float)))

def distances(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Row-wise Euclidean distances between broadcastable arrays of points (..., 2)."""
    return np.linalg.norm(a - b, axis=-1)

def midpoint(p1: np.ndarray, p2: np.ndarray) -> np.ndarray:
    """Midpoint between two 2D points."""
    return np.array([(p1[0] + p2[0]) / 2, (p1[1] + p2[1]) / 2])

def _point_list(obj, min_count=1) -> np.ndarray:
    """Convert a sequence of (x, y) pairs to a float array of shape (m, 2)."""
    pts = np.asarray(obj, dtype=float)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"expected a list of 2D points, got shape {pts.shape}")
    if len(pts) < min_count:
        raise ValueError(f"expected at least {min_count} point(s), got {len(pts)}")
    return pts

# -------------------------
# 2. ORIENTATION RESOLVERS
# -------------------------
# Each resolver maps one element to an array of shape (k, 2, 2):
# candidate i is entered at [i, 0] and left at [i, 1].

def point_orientations(point) -> np.ndarray:
    """A point is entered and left at the same place."""
    p = as_point(point)
    return np.array([[p, p]])

def segment_orientations(segment) -> np.ndarray:
    """A segment (a, b) can be traversed a -> b or b -> a."""
    pts = _point_list(segment, min_count=2)
    if len(pts) != 2:
        raise ValueError(f"a segment has exactly 2 end points, got {len(pts)}")
    a, b = pts
    return np.array([[a, b], [b, a]])

def polyline_orientations(polyline) -> np.ndarray:
    """An open polyline is walked forwards or backwards, so only its ends matter."""
    pts = _point_list(polyline)
    first, last = pts[0], pts[-1]
    return np.array([[first, last], [last, first]])

def polygon_orientations(polygon) -> np.ndarray:
    """
    A closed polygon can be started at any vertex; going all the way around
    brings the traversal back to that same vertex.
    """
    pts = _point_list(polygon)
    return np.stack([pts, pts], axis=1)

# -------------------------
# 3. INSTANCE GENERATION
# -------------------------
def generate_grid_points(M: int) -> np.ndarray:
    """Generate a uniform MxM grid of points in [0,1]^2 (cell centers)."""
    step = 1 / M
    centers = np.arange(M) * step + step / 2
    xs, ys = np.meshgrid(centers, centers, indexing="ij")
    return np.column_stack([xs.ravel(), ys.ravel()])

def generate_random_points(n: int, seed=None) -> np.ndarray:
    """n points drawn uniformly from [0,1]^2."""
    rng = np.random.default_rng(seed)
    return rng.uniform(0, 1, size=(n, 2))

def generate_random_segments(n: int, max_length: float = 0.1, seed=None) -> np.ndarray:
    """
    n segments with uniformly random centers in [0,1]^2, random direction and
    length in (0, max_length]. Returns an array of shape (n, 2, 2).
    """
    rng = np.random.default_rng(seed)
    centers = rng.uniform(0, 1, size=(n, 2))
    angles = rng.uniform(0, pi, size=n)
    # uniform() samples [0, max_length); flip it so no segment is degenerate
    half = (max_length - rng.uniform(0, max_length, size=n)) / 2
    offsets = np.column_stack([np.cos(angles), np.sin(angles)]) * half[:, None]
    return np.stack([centers - offsets, centers + offsets], axis=1)

def regular_polygon(center, radius: float, sides: int, phase: float = 0.0) -> np.ndarray:
    """Vertices of a regular polygon, counter-clockwise."""
    cx, cy = as_point(center)
    return np.array([
        (cx + radius * cos(phase + 2 * pi * i / sides),
         cy + radius * sin(phase + 2 * pi * i / sides))
        for i in range(sides)
    ])
