"""Anomaly Application Service.

Main application service that coordinates domain and infrastructure
for anomaly detection training, prediction and evaluation use cases.
"""

import logging
import time
from datetime import datetime

from domain.interfaces import (
    IAnomalyEvaluator,
    IAnomalyModelPredictor,
    IAnomalyModelTrainer,
    IModelStorage,
)
from domain.services import AnomalyDetectionService, GaussianAnomalyDataGenerator
from domain.value_objects import (
    AnomalyEvaluation,
    ExampleSet,
    GaussianAnomalyConfig,
    ModelInfo,
    PipelineConfig,
    PipelineReport,
    PredictionBatch,
    PredictionRequest,
    SVMParameters,
)

_LOGGER = logging.getLogger(__name__)


class AnomalyApplicationService:
    """Application service for anomaly detection.

    This service is the main entry point for all anomaly detection
    operations. It orchestrates domain services and infrastructure adapters.
    """

    def __init__(
        self,
        trainer: IAnomalyModelTrainer,
        predictor: IAnomalyModelPredictor,
        evaluator: IAnomalyEvaluator,
        storage: IModelStorage,
        data_generator: GaussianAnomalyDataGenerator | None = None,
    ) -> None:
        """Initialize the application service.

        Args:
            trainer: Model trainer implementation
            predictor: Model predictor implementation
            evaluator: Evaluator implementation
            storage: Model storage implementation
            data_generator: Synthetic data generator (optional)
        """
        self._detection_service = AnomalyDetectionService(
            trainer=trainer,
            predictor=predictor,
            evaluator=evaluator,
            storage=storage,
        )
        self._predictor = predictor
        self._storage = storage
        self._data_generator = data_generator or GaussianAnomalyDataGenerator()

    async def train_with_data(
        self, examples: ExampleSet, parameters: SVMParameters | None = None
    ) -> ModelInfo:
        """Train a model with provided examples.

        Args:
            examples: Training examples
            parameters: SVM parameters (optional)

        Returns:
            Information about the trained model
        """
        _LOGGER.info("Starting model training with %d examples", examples.size)
        model_info = await self._detection_service.train_model(examples, parameters)
        _LOGGER.info(
            "Model training completed: %s, metrics: %s",
            model_info.model_id,
            model_info.metrics,
        )
        return model_info

    async def train_with_generated_data(
        self,
        config: GaussianAnomalyConfig,
        parameters: SVMParameters | None = None,
    ) -> ModelInfo:
        """Train a model on synthetic Gaussian data.

        Args:
            config: Synthetic data configuration
            parameters: SVM parameters (optional)

        Returns:
            Information about the trained model
        """
        _LOGGER.info(
            "Generating %d synthetic training examples (anomaly fraction %.2f)",
            config.num_samples,
            config.anomaly_fraction,
        )
        examples = self._data_generator.generate(config)
        return await self.train_with_data(examples, parameters)

    async def retrain(self, model_id: str, examples: ExampleSet) -> ModelInfo:
        """Train a new model with the parameters of an existing one."""
        _LOGGER.info("Retraining from model %s", model_id)
        return await self._detection_service.retrain_model(model_id, examples)

    async def predict(self, request: PredictionRequest) -> PredictionBatch:
        """Label the examples of a request.

        Args:
            request: Prediction request

        Returns:
            One prediction per example
        """
        _LOGGER.debug("Predicting %d examples", request.examples.size)
        batch = await self._detection_service.predict(request)
        _LOGGER.debug(
            "Prediction result: %d of %d anomalous", batch.anomaly_count, batch.size
        )
        return batch

    async def evaluate(
        self, examples: ExampleSet, model_id: str | None = None
    ) -> tuple[PredictionBatch, AnomalyEvaluation]:
        """Predict labelled examples and evaluate the predictions.

        Args:
            examples: Examples with ground-truth labels
            model_id: Model to evaluate, latest when omitted

        Returns:
            Tuple of (predictions, evaluation)
        """
        return await self._detection_service.evaluate(examples, model_id)

    async def run_pipeline(self, config: PipelineConfig) -> PipelineReport:
        """Generate data, train, predict and evaluate in sequence.

        Args:
            config: Data and SVM configuration of the run

        Returns:
            Report holding the model, evaluation and training time
        """
        train_examples = self._data_generator.generate(config.train_data)
        test_examples = self._data_generator.generate(config.test_data)

        start = time.perf_counter()
        model_info = await self.train_with_data(train_examples, config.parameters)
        training_seconds = time.perf_counter() - start

        predictions, evaluation = await self.evaluate(test_examples, model_info.model_id)

        return PipelineReport(
            model_info=model_info,
            evaluation=evaluation,
            training_seconds=training_seconds,
            predictions=predictions,
        )

    async def is_ready(self) -> bool:
        """Check if the service is ready to make predictions.

        Returns:
            True if a trained model is available
        """
        return await self._detection_service.is_ready()

    async def get_status(self) -> dict:
        """Get the current status of the service.

        Returns:
            Dictionary with status information
        """
        ready = await self.is_ready()
        models = await self._storage.list_models()

        status = {
            "ready": ready,
            "model_count": len(models),
            "timestamp": datetime.now().isoformat(),
        }

        if models:
            latest = models[0]
            status["latest_model"] = {
                "id": latest.model_id,
                "created_at": latest.created_at.isoformat(),
                "training_samples": latest.training_samples,
                "metrics": latest.metrics,
            }

        return status

    async def get_model_info(self, model_id: str | None = None) -> ModelInfo | None:
        """Get information about a specific model.

        Args:
            model_id: Model ID or None for latest

        Returns:
            Model information or None if not found
        """
        return await self._detection_service.get_model_info(model_id)

    async def list_models(self) -> list[ModelInfo]:
        """List all available models."""
        return await self._storage.list_models()

    async def delete_model(self, model_id: str) -> None:
        """Delete a model.

        Args:
            model_id: Model ID to delete
        """
        _LOGGER.info("Deleting model: %s", model_id)
        await self._storage.delete_model(model_id)
        self._predictor.invalidate_cache()
