import random
from collections import Counter

import pytest

from slowmokit.model_selection import train_test_split


def _data(n):
    x = [[i, i * 2] for i in range(n)]
    y = [i % 3 for i in range(n)]
    return x, y


def test_sizes_follow_train_size():
    x, y = _data(10)
    x_train, y_train, x_test, y_test = train_test_split(
        x, y, rng=random.Random(1)
    )
    assert len(x_train) == len(y_train) == int(10 * 0.7)
    assert len(x_test) == len(y_test) == 10 - int(10 * 0.7)


def test_pairs_stay_together():
    x, y = _data(12)
    original = {tuple(features): target for features, target in zip(x, y)}
    x_train, y_train, x_test, y_test = train_test_split(
        x, y, train_size=0.5, rng=random.Random(7)
    )
    for features, target in zip(x_train + x_test, y_train + y_test):
        assert original[tuple(features)] == target


def test_every_sample_used_once():
    x, y = _data(9)
    x_train, _, x_test, _ = train_test_split(x, y, rng=random.Random(3))
    assert Counter(map(tuple, x_train + x_test)) == Counter(map(tuple, x))


def test_same_seed_same_split():
    x, y = _data(15)
    first = train_test_split(x, y, rng=random.Random(42))
    second = train_test_split(x, y, rng=random.Random(42))
    assert first == second


def test_length_mismatch_raises():
    with pytest.raises(ValueError, match="size of both iterables"):
        train_test_split([1, 2, 3], [1, 2])


def test_no_test_samples_raises():
    with pytest.raises(ValueError, match="Dataset too small"):
        train_test_split([1, 2], [0, 1], train_size=1.0)


def test_empty_dataset_raises():
    with pytest.raises(ValueError, match="Dataset too small"):
        train_test_split([], [])