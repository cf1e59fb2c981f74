"""Domain exceptions.

Errors raised by adapters and services when an anomaly detection
operation cannot be completed.
"""


class AnomalyDetectionError(Exception):
    """Base class for anomaly detection errors."""

    pass


class TrainingError(AnomalyDetectionError):
    """Raised when a model cannot be trained."""

    pass


class PredictionError(AnomalyDetectionError):
    """Raised when predictions cannot be produced."""

    pass


class EvaluationError(AnomalyDetectionError):
    """Raised when predictions cannot be evaluated against ground truth."""

    pass


class ModelNotFoundError(AnomalyDetectionError):
    """Raised when a model is not found in storage."""

    pass


class StorageError(AnomalyDetectionError):
    """Raised when a storage operation fails."""

    pass
