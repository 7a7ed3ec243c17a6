"""Naive Bayes for binary labels and binary features."""

from __future__ import annotations

from collections.abc import Sequence


class BernoulliNB:
    """Bernoulli naive Bayes over the labels 0 and 1."""

    @staticmethod
    def _prior(y_train: Sequence[int], label: int) -> float:
        return sum(1 for y in y_train if y == label) / len(y_train)

    @staticmethod
    def _conditional(
        x_train: Sequence[Sequence[int]],
        y_train: Sequence[int],
        column: int,
        value: int,
        label: int,
    ) -> float:
        matching = [row[column] for row, y in zip(x_train, y_train) if y == label]
        hits = sum(1 for v in matching if v == value)
        return hits / len(matching) if matching else float(hits)

    def fit_predict(
        self,
        x_train: Sequence[Sequence[int]],
        y_train: Sequence[int],
        x_test: Sequence[int],
    ) -> int:
        """Return the predicted label (0 or 1) of ``x_test``."""
        if not x_train or not y_train:
            raise ValueError("Training data must not be empty")
        n_features = len(x_train[0])

        posteriors = []
        for label in (0, 1):
            likelihood = 1.0
            for column in range(n_features):
                value = x_test[column]
                cond = self._conditional(x_train, y_train, column, value, label)
                likelihood *= cond * value + (1 - cond) * (1 - value)
            posteriors.append(self._prior(y_train, label) * likelihood)

        best = 0
        for label, post in enumerate(posteriors):
            if post > posteriors[best]:
                best = label
        return best