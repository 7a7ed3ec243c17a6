"""K-means clustering of points in the plane."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

from .randomness import _default_rng


class KMeans:
    """Groups two-dimensional points into ``k`` clusters.

    Only the first two coordinates of each point are used. Without initial
    centroids, ``k`` distinct input points are chosen at random as the
    starting centroids.
    """

    def __init__(
        self,
        k: int,
        epoch: int = 40,
        initial_centroids: Sequence[Sequence[float]] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if k <= 0:
            raise ValueError("k should be a positive integer.")
        self.k = k
        self.epoch = epoch
        self._centroids: list[list[float]] = (
            [[float(c) for c in centroid] for centroid in initial_centroids]
            if initial_centroids is not None
            else []
        )
        self._rng = rng if rng is not None else _default_rng
        self._clusters: list[int] = []

    def fit(self, x: Sequence[Sequence[float]]) -> None:
        """Assign every point to a cluster and move the centroids."""
        points = [(float(p[0]), float(p[1])) for p in x]
        n = len(points)

        if len(self._centroids) != self.k:
            if n < self.k:
                raise ValueError("Range should be of length atleast k")
            chosen = sorted(self._rng.sample(range(n), self.k))
            self._centroids = [list(points[i]) for i in chosen]

        # Labels from an earlier fit are kept where they exist.
        self._clusters = (self._clusters + [-1] * n)[:n]

        for _ in range(self.epoch):
            changed = False
            for pos, point in enumerate(points):
                nearest = min(
                    range(self.k),
                    key=lambda i: math.dist(self._centroids[i], point),
                )
                if self._clusters[pos] != nearest:
                    changed = True
                self._clusters[pos] = nearest

            sums = [[0.0, 0.0] for _ in range(self.k)]
            counts = [0] * self.k
            for label, (px, py) in zip(self._clusters, points):
                sums[label][0] += px
                sums[label][1] += py
                counts[label] += 1
            self._centroids = [
                [sx / count, sy / count] if count else [sx, sy]
                for (sx, sy), count in zip(sums, counts)
            ]

            if not changed:
                break

    def predict(self, x: Sequence[Sequence[float]]) -> list[int]:
        """Fit on ``x`` and return the cluster of each point."""
        self.fit(x)
        return self.labels()

    def labels(self) -> list[int]:
        """The cluster each point of the last fit belongs to."""
        return list(self._clusters)

    def centroids(self) -> list[list[float]]:
        """The final centroid of each cluster."""
        return [list(centroid) for centroid in self._centroids]