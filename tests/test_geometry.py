import unittest

import numpy as np

from insertion_tsp.geometry import (
    as_point,
    distance,
    generate_grid_points,
    generate_random_segments,
    point_orientations,
    polygon_orientations,
    polyline_orientations,
    regular_polygon,
    segment_orientations,
)


class TestPoints(unittest.TestCase):
    def test_distance(self) -> None:
        self.assertAlmostEqual(distance((0.0, 0.0), (3.0, 4.0)), 5.0)
        self.assertEqual(distance([1, 1], np.array([1.0, 1.0])), 0.0)

    def test_as_point_rejects_wrong_shape(self) -> None:
        with self.assertRaises(ValueError):
            as_point((1.0, 2.0, 3.0))

    def test_grid_points_are_cell_centers(self) -> None:
        pts = generate_grid_points(2)
        np.testing.assert_allclose(pts, [[0.25, 0.25], [0.25, 0.75], [0.75, 0.25], [0.75, 0.75]])


class TestOrientationResolvers(unittest.TestCase):
    def test_point(self) -> None:
        out = point_orientations((1.0, 2.0))
        self.assertEqual(out.shape, (1, 2, 2))
        np.testing.assert_allclose(out[0, 0], out[0, 1])

    def test_segment_both_directions(self) -> None:
        out = segment_orientations(((0.0, 0.0), (1.0, 2.0)))
        np.testing.assert_allclose(out, [[[0, 0], [1, 2]], [[1, 2], [0, 0]]])

    def test_polyline_uses_end_points(self) -> None:
        out = polyline_orientations([(0.0, 0.0), (5.0, 5.0), (1.0, 0.0)])
        np.testing.assert_allclose(out, [[[0, 0], [1, 0]], [[1, 0], [0, 0]]])

    def test_malformed_shapes_are_rejected(self) -> None:
        for resolver, shape in [
            (polyline_orientations, []),
            (polygon_orientations, []),
            (segment_orientations, [(0.0, 0.0)]),
            (segment_orientations, [(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)]),
            (polyline_orientations, [(0.0, 0.0, 0.0)]),
        ]:
            with self.subTest(resolver=resolver.__name__, shape=shape):
                with self.assertRaises(ValueError):
                    resolver(shape)

    def test_polygon_enters_and_leaves_at_each_vertex(self) -> None:
        square = regular_polygon((0.0, 0.0), 1.0, 4)
        out = polygon_orientations(square)
        self.assertEqual(out.shape, (4, 2, 2))
        np.testing.assert_allclose(out[:, 0], square)
        np.testing.assert_allclose(out[:, 1], square)


class TestRandomSegments(unittest.TestCase):
    def test_reproducible_and_non_degenerate(self) -> None:
        a = generate_random_segments(200, max_length=0.05, seed=9)
        b = generate_random_segments(200, max_length=0.05, seed=9)
        np.testing.assert_array_equal(a, b)
        self.assertEqual(a.shape, (200, 2, 2))
        lengths = np.linalg.norm(a[:, 1] - a[:, 0], axis=1)
        self.assertTrue(np.all(lengths > 0))
        self.assertTrue(np.all(lengths <= 0.05 + 1e-12))

    def test_empty(self) -> None:
        self.assertEqual(generate_random_segments(0, seed=1).shape, (0, 2, 2))
