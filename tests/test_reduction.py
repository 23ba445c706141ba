"""Tests for threadmatch.core.reduction — k-means++ palette reduction in LAB."""

import logging

import numpy as np
from threadmatch.core.reduction import _lloyd, _seed_centroids, reduce_color_palette

REDS = [(250, 0, 0), (245, 5, 0), (255, 0, 5), (240, 10, 10), (252, 3, 3)]
BLUES = [(0, 0, 250), (5, 0, 245), (0, 5, 255), (10, 10, 240), (3, 3, 252)]


def _valid(rgb) -> bool:
    return len(rgb) == 3 and all(isinstance(c, int) and 0 <= c <= 255 for c in rgb)


class TestSmallInput:
    def test_returns_input_unchanged(self):
        colours = [(1, 2, 3), (4, 5, 6)]
        assert reduce_color_palette(colours, 2) == colours
        assert reduce_color_palette(colours, 10) == colours

    def test_returns_a_copy(self):
        colours = [(1, 2, 3)]
        result = reduce_color_palette(colours, 4)
        assert result is not colours
        result.append((0, 0, 0))
        assert colours == [(1, 2, 3)]

    def test_empty(self):
        assert reduce_color_palette([], 3) == []


class TestReduction:
    def test_exactly_k_valid_colours(self):
        rng = np.random.default_rng(0)
        colours = [tuple(int(v) for v in row) for row in rng.integers(0, 256, size=(500, 3))]
        result = reduce_color_palette(colours, 8, rng=np.random.default_rng(1))
        assert len(result) == 8
        assert all(_valid(c) for c in result)

    def test_seeded_is_reproducible(self):
        colours = REDS + BLUES + [(0, 200, 0), (20, 180, 30)]
        a = reduce_color_palette(colours, 3, rng=np.random.default_rng(7))
        b = reduce_color_palette(colours, 3, rng=np.random.default_rng(7))
        assert a == b

    def test_unseeded_still_returns_k(self):
        assert len(reduce_color_palette(REDS + BLUES, 2)) == 2

    def test_separates_clusters(self):
        result = reduce_color_palette(REDS + BLUES, 2, rng=np.random.default_rng(3))
        reds = [c for c in result if c[0] > 200 and c[2] < 50]
        blues = [c for c in result if c[2] > 200 and c[0] < 50]
        assert len(reds) == 1
        assert len(blues) == 1

    def test_duplicates_still_give_k(self):
        colours = [(10, 10, 10)] * 5 + [(200, 0, 0)] * 5
        result = reduce_color_palette(colours, 3, rng=np.random.default_rng(11))
        assert len(result) == 3
        assert all(_valid(c) for c in result)

    def test_single_iteration(self):
        result = reduce_color_palette(REDS + BLUES, 4, max_iterations=1, rng=np.random.default_rng(5))
        assert len(result) == 4

    def test_zero_target(self):
        assert reduce_color_palette(REDS, 0) == []


class TestSeeding:
    def test_never_reseeds_a_covered_point(self):
        # Five copies of one colour plus a single outlier: the second seed must be the outlier.
        points = np.array([[50.0, 0.0, 0.0]] * 5 + [[80.0, 20.0, -10.0]])
        for seed in range(25):
            centroids = _seed_centroids(points, 2, np.random.default_rng(seed))
            assert {tuple(c) for c in centroids} == {(50.0, 0.0, 0.0), (80.0, 20.0, -10.0)}

    def test_all_points_covered_draws_uniformly(self):
        points = np.array([[30.0, 5.0, 5.0]] * 4)
        centroids = _seed_centroids(points, 3, np.random.default_rng(0))
        assert centroids.shape == (3, 3)
        assert np.all(centroids == points[0])


class TestLloyd:
    POINTS = np.array([[50.0, 0.0, 0.0], [52.0, 0.0, 0.0]])

    def test_empty_cluster_keeps_centroid(self):
        centroids = np.array([[55.0, 0.0, 0.0], [-100.0, 40.0, 40.0]])
        result = _lloyd(self.POINTS, centroids, max_iterations=1)
        assert result[0].tolist() == [51.0, 0.0, 0.0]
        assert result[1].tolist() == [-100.0, 40.0, 40.0]

    def test_small_shift_is_not_a_move(self, caplog):
        centroids = np.array([[51.05, 0.0, 0.0]])
        with caplog.at_level(logging.DEBUG, logger='threadmatch.core.reduction'):
            result = _lloyd(self.POINTS, centroids, max_iterations=20)
        assert result[0].tolist() == [51.05, 0.0, 0.0]
        assert 'converged after 1 round' in caplog.text

    def test_converges_once_centroids_settle(self, caplog):
        centroids = np.array([[58.0, 3.0, -3.0]])
        with caplog.at_level(logging.DEBUG, logger='threadmatch.core.reduction'):
            result = _lloyd(self.POINTS, centroids, max_iterations=20)
        assert result[0].tolist() == [51.0, 0.0, 0.0]
        assert 'converged after 2 round' in caplog.text

    def test_stops_at_max_iterations(self, caplog):
        centroids = np.array([[58.0, 3.0, -3.0]])
        with caplog.at_level(logging.DEBUG, logger='threadmatch.core.reduction'):
            _lloyd(self.POINTS, centroids, max_iterations=1)
        assert 'stopped at max_iterations=1' in caplog.text
