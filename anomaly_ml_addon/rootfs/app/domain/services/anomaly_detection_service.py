"""Anomaly detection service.

Domain service for orchestrating one-class training, prediction and evaluation.
"""

from domain.exceptions import AnomalyDetectionError
from domain.interfaces import (
    IAnomalyEvaluator,
    IAnomalyModelPredictor,
    IAnomalyModelTrainer,
    IModelStorage,
)
from domain.value_objects import (
    AnomalyEvaluation,
    ExampleSet,
    ModelInfo,
    PredictionBatch,
    PredictionRequest,
    SVMParameters,
)


class AnomalyDetectionService:
    """Service for anomaly detection using one-class models.

    This service orchestrates training, prediction and evaluation
    through the provided interfaces.
    """

    def __init__(
        self,
        trainer: IAnomalyModelTrainer,
        predictor: IAnomalyModelPredictor,
        evaluator: IAnomalyEvaluator,
        storage: IModelStorage,
    ) -> None:
        """Initialize the anomaly detection service.

        Args:
            trainer: Model trainer implementation
            predictor: Model predictor implementation
            evaluator: Evaluator implementation
            storage: Model storage implementation
        """
        self._trainer = trainer
        self._predictor = predictor
        self._evaluator = evaluator
        self._storage = storage

    async def train_model(
        self, examples: ExampleSet, parameters: SVMParameters | None = None
    ) -> ModelInfo:
        """Train a new anomaly detection model."""
        return await self._trainer.train(examples, parameters)

    async def retrain_model(self, model_id: str, examples: ExampleSet) -> ModelInfo:
        """Train a new model reusing an existing model's parameters."""
        return await self._trainer.retrain(model_id, examples)

    async def predict(self, request: PredictionRequest) -> PredictionBatch:
        """Label the examples of a request."""
        return await self._predictor.predict(request)

    async def evaluate(
        self, examples: ExampleSet, model_id: str | None = None
    ) -> tuple[PredictionBatch, AnomalyEvaluation]:
        """Predict the examples then compare predictions with their labels.

        Args:
            examples: Labelled examples
            model_id: Model to use, latest when omitted

        Returns:
            Tuple of (predictions, evaluation)
        """
        predictions = await self._predictor.predict(
            PredictionRequest(examples=examples, model_id=model_id)
        )
        return predictions, self._evaluator.evaluate(examples, predictions)

    async def is_ready(self) -> bool:
        """Check if the service is ready to make predictions.

        Returns:
            True if a trained model is available
        """
        return await self._predictor.has_trained_model()

    async def get_model_info(self, model_id: str | None = None) -> ModelInfo | None:
        """Get information about a model.

        Args:
            model_id: Model ID or None for latest

        Returns:
            Model information or None if not found
        """
        if model_id is None:
            model_id = await self._storage.get_latest_model_id()
            if model_id is None:
                return None

        try:
            _, info = await self._storage.load_model(model_id)
            return info
        except AnomalyDetectionError:
            return None
