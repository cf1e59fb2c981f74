"""Anomaly model predictor interface.

Contract for labelling examples with trained models.
"""

from abc import ABC, abstractmethod

from domain.value_objects import PredictionBatch, PredictionRequest


class IAnomalyModelPredictor(ABC):
    """Contract for anomaly prediction operations."""

    @abstractmethod
    async def predict(self, request: PredictionRequest) -> PredictionBatch:
        """Predict a label for every example using the specified or latest model.

        Args:
            request: Prediction request with the examples to classify

        Returns:
            PredictionBatch with one prediction per example

        Raises:
            ModelNotFoundError: If no model is available
            PredictionError: If prediction fails
        """
        pass

    @abstractmethod
    async def has_trained_model(self) -> bool:
        """Check if a trained model is available.

        Returns:
            True if at least one trained model exists
        """
        pass

    def invalidate_cache(self) -> None:
        """Forget any model held in memory.

        Called after a model is removed from storage. Predictors without
        a cache keep this no-op.
        """
