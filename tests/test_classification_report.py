import io

import pytest

from slowmokit.classification_report import ClassificationReport

TRUE = [0, 1, 2, 2, 2]
PRED = [0, 0, 2, 2, 1]


@pytest.fixture
def report():
    return ClassificationReport(TRUE, PRED)


def test_precision_example(report):
    assert report.precision() == {0: 0.5, 1: 0.0, 2: 1.0}


def test_recall_example(report):
    assert report.recall() == {0: 1.0, 1: 0.0, 2: 0.67}


def test_keys_are_true_classes(report):
    for scores in (report.precision(), report.recall(), report.f1_score(), report.accuracy()):
        assert list(scores) == [0, 1, 2]


def test_scores_within_unit_interval(report):
    for scores in (report.precision(), report.recall(), report.f1_score(), report.accuracy()):
        assert all(0.0 <= value <= 1.0 for value in scores.values())


def test_f1_zero_when_precision_or_recall_zero(report):
    precisions, recalls, f1 = report.precision(), report.recall(), report.f1_score()
    for label in f1:
        if precisions[label] == 0 or recalls[label] == 0:
            assert f1[label] == 0.0


def test_f1_between_precision_and_recall(report):
    precisions, recalls, f1 = report.precision(), report.recall(), report.f1_score()
    for label in f1:
        if f1[label]:
            low = min(precisions[label], recalls[label])
            high = max(precisions[label], recalls[label])
            assert low - 0.01 <= f1[label] <= high + 0.01


def test_perfect_predictions():
    labels = [0, 1, 1, 2]
    perfect = ClassificationReport(labels, labels)
    for scores in (perfect.precision(), perfect.recall(), perfect.f1_score(), perfect.accuracy()):
        assert set(scores.values()) == {1.0}


def test_format_layout():
    labels = [0, 1, 1, 2]
    text = ClassificationReport(labels, labels).format()
    lines = text.splitlines()
    assert lines[0] == "Class-No. Precision Accuracy  Recall   F1_Score"
    assert len(lines) == 4
    assert [line.split() for line in lines[1:]] == [
        [str(label), "1", "1", "1", "1"] for label in (0, 1, 2)
    ]


def test_print_report_writes_format(report):
    buffer = io.StringIO()
    report.print_report(buffer)
    assert buffer.getvalue() == report.format()


def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        ClassificationReport([0, 1], [0])