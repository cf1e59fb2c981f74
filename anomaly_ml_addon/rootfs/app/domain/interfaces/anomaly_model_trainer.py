"""Anomaly model trainer interface.

Contract for training one-class anomaly detection models.
"""

from abc import ABC, abstractmethod

from domain.value_objects import ExampleSet, ModelInfo, SVMParameters


class IAnomalyModelTrainer(ABC):
    """Contract for anomaly model training operations."""

    @abstractmethod
    async def train(
        self, examples: ExampleSet, parameters: SVMParameters | None = None
    ) -> ModelInfo:
        """Train a new model on the provided examples.

        Args:
            examples: Training examples (normally all expected)
            parameters: SVM parameters, trainer defaults when omitted

        Returns:
            ModelInfo with details about the trained model

        Raises:
            TrainingError: If training fails
        """
        pass

    @abstractmethod
    async def retrain(self, model_id: str, examples: ExampleSet) -> ModelInfo:
        """Train a new model with the parameters of an existing one.

        Args:
            model_id: Identifier of the model whose parameters are reused
            examples: New training examples

        Returns:
            ModelInfo with details about the new model

        Raises:
            ModelNotFoundError: If the model doesn't exist
            TrainingError: If training fails
        """
        pass
