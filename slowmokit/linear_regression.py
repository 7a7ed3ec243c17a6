"""Linear regression trained by batch gradient descent."""

from __future__ import annotations

from collections.abc import Sequence

from .model import Model


class LinearRegression(Model):
    """Fits ``y = theta0 + theta1 * x1 + ... + thetaN * xN``."""

    def __init__(self, epochs: int = 100, learning_rate: float = 0.01) -> None:
        self.epochs = epochs
        self.learning_rate = learning_rate
        self._coefficients: list[float] = []

    @property
    def coefficients(self) -> list[float]:
        """Intercept followed by one weight per feature."""
        return list(self._coefficients)

    def _predict_row(self, row: Sequence[float]) -> float:
        intercept, *weights = self._coefficients
        return intercept + sum(w * v for w, v in zip(weights, row))

    def fit(self, x: Sequence[Sequence[float]], y: Sequence[float]) -> None:
        """Train the coefficients from zero for ``epochs`` steps."""
        if not x or not y:
            raise ValueError("Make sure that you have atleast one train example")
        if len(x) != len(y):
            raise ValueError("Number of features and target must be equal")
        rows = [list(row) for row in x]
        n_features = len(rows[0])
        if n_features == 0:
            raise ValueError("Feature size should be at least 1")
        if any(len(row) != n_features for row in rows):
            raise ValueError("All examples must have the same number of features")

        m = len(rows)
        self._coefficients = [0.0] * (n_features + 1)
        for _ in range(self.epochs):
            errors = [self._predict_row(row) - target for row, target in zip(rows, y)]
            self._coefficients[0] -= self.learning_rate * sum(errors) / m
            for feature in range(n_features):
                gradient = sum(e * row[feature] for e, row in zip(errors, rows))
                self._coefficients[feature + 1] -= self.learning_rate * gradient / m

    def predict(self, x: Sequence[Sequence[float]]) -> list[float]:
        """Return the predicted target of each example."""
        if not self._coefficients:
            raise ValueError("Model has not been fitted")
        expected = len(self._coefficients) - 1
        if any(len(row) != expected for row in x):
            raise ValueError(f"Each example must have {expected} features")
        return [self._predict_row(row) for row in x]

    def format_coefficients(self) -> str:
        """One ``Θi: value`` line per coefficient."""
        return "\n".join(f"Θ{i}: {c:g}" for i, c in enumerate(self._coefficients))