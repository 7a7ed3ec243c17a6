"""Splitting paired data into random train and test subsets."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any, TypeVar

from .randomness import _default_rng

X = TypeVar("X")
Y = TypeVar("Y")


def train_test_split(
    x: Sequence[X],
    y: Sequence[Y],
    test_size: float = 0.3,
    train_size: float = 0.7,
    rng: random.Random | None = None,
) -> tuple[list[X], list[Y], list[X], list[Y]]:
    """Shuffle ``x`` and ``y`` together and split them.

    Returns ``(x_train, y_train, x_test, y_test)``. The number of training
    samples is ``int(len(x) * train_size)`` and the rest form the test part;
    ``test_size`` is accepted for symmetry but does not affect the split.
    Raises ``ValueError`` if the inputs differ in length or no sample is left
    for testing.
    """
    if len(x) != len(y):
        raise ValueError("size of both iterables must be equal.")

    pairs: list[tuple[Any, Any]] = list(zip(x, y))
    generator = rng if rng is not None else _default_rng
    generator.shuffle(pairs)

    n = len(pairs)
    train_count = int(n * train_size)
    if n - train_count <= 0:
        raise ValueError("Dataset too small")

    train, test = pairs[:train_count], pairs[train_count:]
    x_train = [features for features, _ in train]
    y_train = [target for _, target in train]
    x_test = [features for features, _ in test]
    y_test = [target for _, target in test]
    return x_train, y_train, x_test, y_test