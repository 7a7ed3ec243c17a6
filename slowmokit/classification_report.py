"""Per-class precision, recall, F1 score and accuracy with a text report."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Hashable, Sequence
from typing import TextIO

from .metrics import _round2

_HEADER = "Class-No. Precision Accuracy  Recall   F1_Score\n"


class ClassificationReport:
    """Confusion counts for each class found among the true values."""

    def __init__(
        self,
        true_values: Sequence[Hashable],
        predicted_values: Sequence[Hashable],
    ) -> None:
        if len(true_values) != len(predicted_values):
            raise ValueError("true and predicted values must have same size")
        self.true_values = list(true_values)
        self.predicted_values = list(predicted_values)

        self._classes: Counter = Counter(self.true_values)
        self._true_pos: Counter = Counter()
        self._false_pos: Counter = Counter()
        self._false_neg: Counter = Counter()
        self._true_neg: Counter = Counter()

        pairs = list(zip(self.true_values, self.predicted_values))
        for actual, predicted in pairs:
            if actual == predicted:
                self._true_pos[actual] += 1
            else:
                self._false_neg[actual] += 1
                self._false_pos[predicted] += 1
        for label in self._classes:
            self._true_neg[label] = sum(
                actual != label and predicted != label for actual, predicted in pairs
            )

    @property
    def classes(self) -> list[Hashable]:
        """The distinct true values, in sorted order."""
        return sorted(self._classes)

    def precision(self) -> dict[Hashable, float]:
        """True positives over predicted positives, per class."""
        result = {}
        for label in self.classes:
            tp, fp = self._true_pos[label], self._false_pos[label]
            result[label] = _round2(tp / (tp + fp) if tp or fp else 0.0)
        return result

    def recall(self) -> dict[Hashable, float]:
        """True positives over actual positives, per class."""
        result = {}
        for label in self.classes:
            tp, fn = self._true_pos[label], self._false_neg[label]
            result[label] = _round2(tp / (tp + fn) if tp or fn else 0.0)
        return result

    def f1_score(self) -> dict[Hashable, float]:
        """Harmonic mean of the rounded precision and recall, per class."""
        precisions, recalls = self.precision(), self.recall()
        result = {}
        for label in self.classes:
            p, r = precisions[label], recalls[label]
            result[label] = 0.0 if p == 0 or r == 0 else _round2(2 * p * r / (p + r))
        return result

    def accuracy(self) -> dict[Hashable, float]:
        """Correctly classified share of all samples, per class."""
        result = {}
        for label in self.classes:
            tp, tn = self._true_pos[label], self._true_neg[label]
            total = tp + tn + self._false_pos[label] + self._false_neg[label]
            result[label] = _round2((tp + tn) / total)
        return result

    def format(self) -> str:
        """Return the report as a table with one line per class."""
        precisions = self.precision()
        accuracies = self.accuracy()
        recalls = self.recall()
        f1_scores = self.f1_score()
        lines = [_HEADER]
        for label in self.classes:
            lines.append(
                f"{label!s:>4}{precisions[label]:>10g}{accuracies[label]:>10g}"
                f"{recalls[label]:>11g}{f1_scores[label]:>10g}\n"
            )
        return "".join(lines)

    def print_report(self, file: TextIO | None = None) -> None:
        """Write the formatted report to ``file`` (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.format())