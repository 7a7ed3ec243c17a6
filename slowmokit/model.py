"""Abstract interface shared by trainable models."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any


class Model(ABC):
    """A model that is trained with :meth:`fit` and queried with :meth:`predict`."""

    @abstractmethod
    def fit(self, x: Sequence[Sequence[Any]], y: Sequence[Any]) -> None:
        """Train the model on features ``x`` and targets ``y``.

        Implementations raise ``ValueError`` on invalid input.
        """

    @abstractmethod
    def predict(self, x: Sequence[Sequence[Any]]) -> list[Any]:
        """Return predicted targets for the features ``x``."""