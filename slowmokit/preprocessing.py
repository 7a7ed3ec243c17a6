"""Encoding and rescaling of feature columns."""

from __future__ import annotations

import math
import warnings
from collections.abc import Hashable, Iterable, Sequence


def _first_seen_indices(values: Iterable[Hashable]) -> dict[Hashable, int]:
    indices: dict[Hashable, int] = {}
    for value in values:
        indices.setdefault(value, len(indices))
    return indices


def label_encoder(values: Sequence[Hashable]) -> list[int]:
    """Replace each value by the order in which it first appears."""
    indices = _first_seen_indices(values)
    return [indices[value] for value in values]


def one_hot_encoder(data: Sequence[Hashable], n_classes: int) -> list[list[int]]:
    """One-hot encode ``data`` into rows of length ``n_classes``.

    Classes are numbered in order of first appearance. Raises ``ValueError``
    if ``data`` holds more than ``n_classes`` distinct values.
    """
    indices = _first_seen_indices(data)
    if len(indices) > n_classes:
        raise ValueError(
            f"data has {len(indices)} distinct classes but n_classes is {n_classes}"
        )
    encoded = []
    for value in data:
        row = [0] * n_classes
        row[indices[value]] = 1
        encoded.append(row)
    return encoded


def normalize(values: Sequence[float]) -> list[float]:
    """Rescale ``values`` linearly onto ``[0, 1]``.

    If all values are equal, every result is 1 and a warning is issued.
    Raises ``ValueError`` for an empty sequence.
    """
    if not values:
        raise ValueError("Cannot normalize an empty sequence")
    low, high = min(values), max(values)
    if low == high:
        warnings.warn("All the values in the given column are equal", stacklevel=2)
        return [1] * len(values)
    span = high - low
    return [(value - low) / span for value in values]


def standardize(values: Sequence[float]) -> list[float]:
    """Shift and scale ``values`` to zero mean and unit population deviation.

    If the deviation is zero, every result is 1 and a warning is issued.
    """
    if not values:
        return []
    n = len(values)
    mean = sum(values) / n
    deviation = math.sqrt(sum((value - mean) ** 2 for value in values) / n)
    if deviation == 0.0:
        warnings.warn("Standard Deviation is zero", stacklevel=2)
        return [1] * n
    return [(value - mean) / deviation for value in values]