"""Palette reduction by k-means++ clustering in CIELAB.

Reduces an unordered collection of RGB colours to ``target_count``
representatives:

  1. Inputs no larger than target_count are returned unchanged (as a copy).
  2. Colours are converted to LAB.
  3. Centroids are seeded with k-means++: the first uniformly at random, each
     next one with probability proportional to the squared LAB distance to
     the nearest centroid already chosen.
  4. Up to max_iterations Lloyd rounds assign points by plain Euclidean LAB
     distance and move each centroid to its cluster mean. Empty clusters keep
     their centroid.
  5. A round in which no centroid moves more than 0.1 in any LAB component
     ends the iteration.
  6. Centroids are converted back to RGB.

Seeding is random. Pass a seeded ``numpy.random.Generator`` as ``rng`` for
reproducible output.

Example:
    rng = np.random.default_rng(42)
    palette = reduce_color_palette(pixel_colours, 12, rng=rng)
"""

import logging
from collections.abc import Sequence

import numpy as np

from threadmatch.core.colorspace import lab_to_rgb, rgb_array_to_lab
from threadmatch.core.types import RGB

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 20
CONVERGENCE_TOLERANCE = 0.1  # LAB units, per component


def _nearest_sq_distances(points: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Squared distance from each point to its nearest centroid."""
    diff = points[:, np.newaxis, :] - centroids[np.newaxis, :, :]
    return np.min(np.sum(diff**2, axis=2), axis=1)


def _seed_centroids(points: np.ndarray, k: int, rng: np.random.Generator) -> np.ndarray:
    """Pick k initial centroids from points with k-means++ weighting."""
    n = len(points)
    centroids = [points[rng.integers(n)]]

    while len(centroids) < k:
        weights = _nearest_sq_distances(points, np.array(centroids))
        cum = np.cumsum(weights)
        total = float(cum[-1])
        if total <= 0.0:
            # Every point already sits on a centroid
            idx = int(rng.integers(n))
        else:
            target = rng.random() * total
            idx = int(np.searchsorted(cum, target, side='right'))
        centroids.append(points[idx])

    return np.array(centroids, dtype=np.float64)


def _lloyd(points: np.ndarray, centroids: np.ndarray, max_iterations: int) -> np.ndarray:
    """Refine centroids in place; returns them."""
    k = len(centroids)
    for iteration in range(max_iterations):
        diff = points[:, np.newaxis, :] - centroids[np.newaxis, :, :]
        labels = np.argmin(np.sum(diff**2, axis=2), axis=1)

        converged = True
        for c in range(k):
            members = points[labels == c]
            if len(members) == 0:
                continue
            mean = members.mean(axis=0)
            if np.any(np.abs(mean - centroids[c]) > CONVERGENCE_TOLERANCE):
                centroids[c] = mean
                converged = False

        if converged:
            logger.debug('k-means converged after %d round(s)', iteration + 1)
            break
    else:
        logger.debug('k-means stopped at max_iterations=%d', max_iterations)

    return centroids


def reduce_color_palette(
    colors: Sequence[RGB],
    target_count: int,
    max_iterations: int = MAX_ITERATIONS,
    rng: np.random.Generator | None = None,
) -> list[RGB]:
    """Reduce colours to exactly target_count representative RGB colours."""
    if len(colors) <= target_count:
        return [tuple(c) for c in colors]
    if target_count <= 0:
        return []
    if rng is None:
        rng = np.random.default_rng()

    points = rgb_array_to_lab(np.array(colors, dtype=np.float64).reshape(-1, 3))
    logger.debug('reducing %d colours to %d', len(points), target_count)

    centroids = _seed_centroids(points, target_count, rng)
    centroids = _lloyd(points, centroids, max_iterations)

    return [lab_to_rgb((float(L), float(a), float(b))) for L, a, b in centroids]
