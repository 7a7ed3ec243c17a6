import pytest

from slowmokit.metrics import accuracy, precision, recall

PRED = [0, 1, 2, 1, 0, 2, 1, 0, 1, 2]
ACTUAL = [0, 0, 2, 1, 0, 2, 1, 0, 1, 2]


def test_accuracy_identical_is_one():
    labels = [1, 0, 1, 1, 0, 1]
    assert accuracy(labels, labels) == 1.0


def test_accuracy_all_wrong_is_zero():
    assert accuracy([1, 1, 1], [0, 0, 0]) == 0.0


def test_accuracy_counts_matches():
    pred = [1, 0, 1, 1, 0, 1]
    true = [1, 0, 0, 1, 0, 1]
    assert accuracy(pred, true) == pytest.approx(5 / 6)


def test_accuracy_string_labels():
    assert accuracy(["a", "b", "c", "a"], ["a", "b", "b", "b"]) == 0.5


def test_accuracy_size_mismatch():
    with pytest.raises(ValueError):
        accuracy([1, 2], [1])


def test_precision_example():
    assert precision(PRED, ACTUAL) == {0: 1.0, 1: 0.75, 2: 1.0}


def test_recall_example():
    assert recall(PRED, ACTUAL) == {0: 0.75, 1: 1.0, 2: 1.0}


def test_perfect_predictions_score_one():
    labels = [0, 1, 2, 0, 1]
    assert set(precision(labels, labels).values()) == {1.0}
    assert set(recall(labels, labels).values()) == {1.0}


def test_keys_cover_distinct_actual_labels():
    assert sorted(precision(PRED, ACTUAL)) == sorted(set(ACTUAL))
    assert sorted(recall(PRED, ACTUAL)) == sorted(set(ACTUAL))


def test_class_never_hit_scores_zero():
    assert precision([1, 1], [0, 1])[0] == 0.0
    assert recall([1, 1], [0, 1])[0] == 0.0


@pytest.mark.parametrize("func", [precision, recall])
def test_size_mismatch_raises(func):
    with pytest.raises(ValueError, match="same size"):
        func([0, 1], [0])