import json

import pytest

from insertion_tsp.cli import run_benchmark, solve_path
from insertion_tsp.geometry import segment_orientations
from insertion_tsp.heuristics import compute_path_cost
from insertion_tsp.path_builder import build


def _write(tmp_path, data, name="input.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_solve_path_segments(tmp_path, capsys) -> None:
    data = {"segments": [[[0, 0], [1, 0]], [[3, 0], [2, 0]], [[4, 0], [5, 0]]], "start": [0, 0]}
    path = _write(tmp_path, data)
    assert solve_path.main([str(path), "--no-config"]) == 0
    result = json.loads(capsys.readouterr().out)
    assert result["kind"] == "segments"
    candidates = [segment_orientations(s) for s in data["segments"]]
    order, orientations = build([0, 1, 2], candidates.__getitem__, (0.0, 0.0))
    assert result["order"] == order
    assert result["orientations"] == orientations
    assert result["length"] == pytest.approx(compute_path_cost(candidates, order, orientations, (0.0, 0.0)))
    # the optimum walks all three segments left to right
    assert result["length"] >= 2.0 - 1e-9
    assert result["start"] == [0.0, 0.0]


def test_solve_path_writes_output_and_plot(tmp_path) -> None:
    path = _write(tmp_path, {"polygons": [[[0, 0], [1, 0], [1, 1]], [[3, 3], [4, 3], [4, 4]]]})
    out = tmp_path / "out.json"
    plot = tmp_path / "path.png"
    assert solve_path.main([str(path), "--no-config", "--start", "0,0", "--out", str(out), "--plot", str(plot)]) == 0
    result = json.loads(out.read_text(encoding="utf-8"))
    assert sorted(result["order"]) == [0, 1]
    assert plot.is_file() and plot.stat().st_size > 0


def test_solve_path_rejects_empty_polygon(tmp_path) -> None:
    path = _write(tmp_path, {"polygons": [[[0, 0], [1, 0]], []]})
    with pytest.raises(SystemExit) as exc:
        solve_path.main([str(path), "--no-config"])
    assert "element #1" in str(exc.value)


@pytest.mark.parametrize("data", [
    {"polylines": [[[0, 0], [1, 1]], []]},
    {"segments": [[[0, 0], [1, 0]], [[2, 2]]]},
    {"segments": [[[0, 0], [1, 0]], [[2, 2], [3, 3], [4, 4]]]},
])
def test_solve_path_reports_bad_element_index(tmp_path, data) -> None:
    path = _write(tmp_path, data)
    with pytest.raises(SystemExit) as exc:
        solve_path.main([str(path), "--no-config"])
    assert "element #1" in str(exc.value)


def test_solve_path_rejects_ambiguous_document(tmp_path) -> None:
    path = _write(tmp_path, {"points": [[0, 0]], "segments": []})
    with pytest.raises(SystemExit):
        solve_path.main([str(path), "--no-config"])


def test_run_benchmark_with_config(tmp_path, capsys) -> None:
    cfg = _write(tmp_path, {"run_benchmark": {"sizes": [4], "trials": 1, "exact": {"max_n": 4}}}, name="bench.json")
    assert run_benchmark.main(["--config", str(cfg), "--seed", "1", "--log-level", "warning"]) == 0
    summary = json.loads(capsys.readouterr().out)
    assert list(summary) == ["4"]
    assert summary["4"]["Exact"] == pytest.approx(1.0)
