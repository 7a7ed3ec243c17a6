"""Accuracy, precision and recall scores for predicted labels."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Hashable, Sequence


def _round2(value: float) -> float:
    """Round a non-negative value to two decimal places, halves upward."""
    return int(value * 100 + 0.5) / 100


def _check_sizes(pred: Sequence, actual: Sequence) -> None:
    if len(pred) != len(actual):
        raise ValueError("Predicted and actual vectors must have same size")


def accuracy(pred: Sequence[Hashable], true_labels: Sequence[Hashable]) -> float:
    """Return the fraction of predictions equal to the true labels.

    Raises ``ValueError`` if the sequences differ in length; an empty input
    yields NaN.
    """
    if len(pred) != len(true_labels):
        raise ValueError("pred and true_labels must have same size")
    if not pred:
        return math.nan
    correct = sum(p == t for p, t in zip(pred, true_labels))
    return correct / len(pred)


def _score(true_pos: Counter, misses: Counter, n_classes: int) -> dict[int, float]:
    scores: dict[int, float] = {}
    for label in range(n_classes):
        hits, wrong = true_pos[label], misses[label]
        value = hits / (hits + wrong) if hits or wrong else 0.0
        scores[label] = _round2(value)
    return scores


def precision(
    pred: Sequence[int], actual: Sequence[int]
) -> dict[int, float]:
    """Per-class precision for labels ``0 .. k-1``, rounded to two decimals.

    ``k`` is the number of distinct values in ``actual``.
    """
    _check_sizes(pred, actual)
    true_pos: Counter = Counter()
    false_pos: Counter = Counter()
    for p, a in zip(pred, actual):
        if p == a:
            true_pos[a] += 1
        else:
            false_pos[p] += 1
    return _score(true_pos, false_pos, len(set(actual)))


def recall(pred: Sequence[int], actual: Sequence[int]) -> dict[int, float]:
    """Per-class recall for labels ``0 .. k-1``, rounded to two decimals.

    ``k`` is the number of distinct values in ``actual``.
    """
    _check_sizes(pred, actual)
    true_pos: Counter = Counter()
    false_neg: Counter = Counter()
    for p, a in zip(pred, actual):
        if p == a:
            true_pos[a] += 1
        else:
            false_neg[a] += 1
    return _score(true_pos, false_neg, len(set(actual)))