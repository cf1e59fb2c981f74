"""Prediction result value objects.

Immutable data structures for ML prediction outputs.
"""

import math
from dataclasses import dataclass
from datetime import datetime

from .anomaly_label import AnomalyLabel


@dataclass(frozen=True)
class AnomalyPrediction:
    """Prediction for a single example.

    Attributes:
        label: Predicted label
        score: Anomaly score, the negated decision function (higher is more anomalous)
    """

    label: AnomalyLabel
    score: float

    def __post_init__(self) -> None:
        """Validate prediction values."""
        if not math.isfinite(self.score):
            raise ValueError(f"score must be finite, got {self.score}")

    @property
    def is_anomalous(self) -> bool:
        """Return True if the example was predicted anomalous."""
        return self.label is AnomalyLabel.ANOMALOUS


@dataclass(frozen=True)
class PredictionBatch:
    """Predictions for every example of a request.

    Attributes:
        model_id: Identifier of the model used for prediction
        predictions: One prediction per example, in request order
        timestamp: When the predictions were made
    """

    model_id: str
    predictions: tuple[AnomalyPrediction, ...]
    timestamp: datetime

    def __post_init__(self) -> None:
        """Validate prediction batch values."""
        if not self.model_id:
            raise ValueError("model_id cannot be empty")
        if not self.predictions:
            raise ValueError("predictions cannot be empty")

    @property
    def size(self) -> int:
        """Return the number of predictions."""
        return len(self.predictions)

    @property
    def anomaly_count(self) -> int:
        """Return the number of examples predicted anomalous."""
        return sum(1 for p in self.predictions if p.is_anomalous)

    def labels(self) -> list[AnomalyLabel]:
        """Return the predicted labels in example order."""
        return [p.label for p in self.predictions]
