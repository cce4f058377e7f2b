import matplotlib

matplotlib.use("Agg")

from insertion_tsp.geometry import generate_random_segments, segment_orientations  # noqa: E402
from insertion_tsp.path_builder import build  # noqa: E402
from insertion_tsp.plotting import plot_path, save_path_plot  # noqa: E402


def _instance(n):
    candidates = [segment_orientations(s) for s in generate_random_segments(n, seed=12)]
    order, orientations = build(list(range(n)), candidates.__getitem__, (0.0, 0.0))
    return candidates, order, orientations


def test_plot_path_draws_elements_and_moves() -> None:
    candidates, order, orientations = _instance(10)
    ax = plot_path(candidates, order, orientations, starting_point=(0.0, 0.0), title="ten")
    assert len(ax.collections) >= 2
    assert ax.get_title() == "ten"
    segments = ax.collections[0].get_segments()
    assert len(segments) == 10


def test_save_path_plot(tmp_path) -> None:
    candidates, order, orientations = _instance(5)
    out = save_path_plot(str(tmp_path / "p.png"), candidates, order, orientations)
    assert (tmp_path / "p.png").stat().st_size > 0
    assert out.endswith("p.png")
