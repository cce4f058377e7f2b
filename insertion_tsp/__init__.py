# Re-export convenient entry points for external use

from .constants import SHUFFLE_SEED

from .errors import (
    InsertionTSPError,
    OrientationError,
    StartingPointError,
)

from .geometry import (
    distance,
    point_orientations,
    segment_orientations,
    polyline_orientations,
    polygon_orientations,
    generate_grid_points,
    generate_random_points,
    generate_random_segments,
)

from .path_builder import (
    PathBuilder,
    PathResult,
    build,
    insertion_order,
)

from .heuristics import (
    compute_path_cost,
    hilbert_order,
    zcurve_order,
)

from .experiment import (
    exact_path,
    evaluate_instance,
    run_experiments,
    save_result_to_file,
    load_result_from_file,
)
