"""K-nearest-neighbours classifier."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence

_DISTANCE_TYPES = ("euclidean", "manhattan")


class KNN:
    """Classifies a point by the labels of its nearest training points."""

    def __init__(self) -> None:
        self._x_train: list[list[float]] | None = None
        self._y_train: list[int] = []
        self.class_nums = 0

    def fit(
        self, x: Sequence[Sequence[float]], y: Sequence[int], class_nums: int
    ) -> None:
        """Store the training points, their labels and the number of classes."""
        if len(x) != len(y):
            raise ValueError("Number of points and labels must be equal")
        self._x_train = [list(row) for row in x]
        self._y_train = list(y)
        self.class_nums = class_nums

    @staticmethod
    def _distance(a: Sequence[float], b: Sequence[float], dist_type: str) -> float:
        if dist_type == "euclidean":
            return math.sqrt(sum((p - q) * (p - q) for p, q in zip(a, b)))
        return float(sum(abs(p - q) for p, q in zip(a, b)))

    def predict(
        self, test: Sequence[float], k: int, dist_type: str = "euclidean"
    ) -> int:
        """Return the class voted for by the neighbours of ``test``.

        The ``k`` nearest points are kept; the farther half of them, rounded
        up, cast the votes, and the lowest class wins a tie.
        """
        if self._x_train is None:
            raise ValueError("Model has not been fitted")
        if dist_type not in _DISTANCE_TYPES:
            raise ValueError(f"Unknown distance type: {dist_type!r}")
        if k < 1:
            raise ValueError("k must be at least 1")

        # Max-heap on (distance, label) through negated keys.
        heap: list[tuple[float, int]] = []
        for row, label in zip(self._x_train, self._y_train):
            dist = self._distance(row, test, dist_type)
            if len(heap) < k:
                heapq.heappush(heap, (-dist, -label))
            elif -heap[0][0] > dist:
                heapq.heapreplace(heap, (-dist, -label))

        farthest_first = sorted(heap)
        voters = farthest_first[: (len(farthest_first) + 1) // 2]

        votes = [0] * self.class_nums
        for _, neg_label in voters:
            label = -neg_label
            if not 0 <= label < self.class_nums:
                raise ValueError(f"Label {label} outside 0..{self.class_nums - 1}")
            votes[label] += 1

        best = 0
        for cls, count in enumerate(votes):
            if count > votes[best]:
                best = cls
        return best