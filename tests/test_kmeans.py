import random

import pytest

from slowmokit.kmeans import KMeans

BLOBS = [
    [0, 0], [1, 1], [-1, -1], [1, 0], [0, 1],
    [5, 5], [6, 6], [4, 4], [5, 6], [6, 5],
    [-4, -4], [-3, -3], [-4, -3], [-3, -4],
]


def test_non_positive_k_rejected():
    with pytest.raises(ValueError):
        KMeans(0)


def test_too_few_points_for_k():
    with pytest.raises(ValueError):
        KMeans(3, rng=random.Random(1)).fit([[0, 0], [1, 1]])


def test_seeded_centroids_give_blob_labels():
    model = KMeans(3, 20, initial_centroids=[[0, 0], [5, 5], [-4, -4]])
    model.fit(BLOBS)
    assert model.labels() == [0] * 5 + [1] * 5 + [2] * 4


def test_centroids_are_blob_means():
    model = KMeans(3, 20, initial_centroids=[[0, 0], [5, 5], [-4, -4]])
    model.fit(BLOBS)
    centroids = model.centroids()
    assert centroids[0] == pytest.approx([0.2, 0.2])
    assert centroids[1] == pytest.approx([5.2, 5.2])
    assert centroids[2] == pytest.approx([-3.5, -3.5])


def test_predict_matches_labels():
    model = KMeans(2, rng=random.Random(3))
    result = model.predict([[0, 0], [0, 1], [10, 10], [10, 11]])
    assert result == model.labels()
    assert result[0] == result[1]
    assert result[2] == result[3]
    assert result[0] != result[2]


def test_random_start_labels_in_range():
    model = KMeans(3, rng=random.Random(7))
    model.fit(BLOBS)
    labels = model.labels()
    assert len(labels) == len(BLOBS)
    assert set(labels) <= {0, 1, 2}
    assert len(model.centroids()) == 3


def test_single_cluster_centroid_is_mean_of_two_points():
    model = KMeans(1, rng=random.Random(0))
    model.fit([[0, 0], [2, 4]])
    assert model.labels() == [0, 0]
    assert model.centroids() == [pytest.approx([1.0, 2.0])]