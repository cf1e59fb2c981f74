"""One-class SVM predictor adapter.

Infrastructure adapter that implements IAnomalyModelPredictor using scikit-learn.
"""

import logging
from datetime import datetime

import numpy as np
from sklearn.svm import OneClassSVM

from domain.exceptions import ModelNotFoundError, PredictionError
from domain.interfaces import IAnomalyModelPredictor, IModelStorage
from domain.value_objects import (
    AnomalyLabel,
    AnomalyPrediction,
    ModelInfo,
    PredictionBatch,
    PredictionRequest,
)

_LOGGER = logging.getLogger(__name__)


class OneClassSVMPredictor(IAnomalyModelPredictor):
    """scikit-learn implementation of the anomaly model predictor.

    Enforces the feature contract recorded at training time and keeps
    the most recently used model in memory.
    """

    def __init__(self, storage: IModelStorage) -> None:
        """Initialize the predictor.

        Args:
            storage: Model storage implementation
        """
        self._storage = storage
        self._cached_model: tuple[str, OneClassSVM, ModelInfo] | None = None

    async def predict(self, request: PredictionRequest) -> PredictionBatch:
        """Label every example of the request.

        Args:
            request: Prediction request with the examples to classify

        Returns:
            PredictionBatch with one prediction per example
        """
        model_id = request.model_id
        if model_id is None:
            model_id = await self._storage.get_latest_model_id()
            if model_id is None:
                raise ModelNotFoundError("No trained model available")

        model, model_info = await self._get_model(model_id)
        self._check_feature_contract(request, model_info)

        X = np.asarray(request.examples.feature_matrix(), dtype=float)
        try:
            raw_labels = model.predict(X)
            # decision_function is positive for inliers
            scores = -model.decision_function(X)
        except ValueError as e:
            raise PredictionError(f"Model {model_id} failed to predict: {e}") from e

        predictions = tuple(
            AnomalyPrediction(
                label=AnomalyLabel.ANOMALOUS if raw == -1 else AnomalyLabel.EXPECTED,
                score=float(score),
            )
            for raw, score in zip(raw_labels, scores)
        )

        batch = PredictionBatch(
            model_id=model_id,
            predictions=predictions,
            timestamp=datetime.now(),
        )
        _LOGGER.debug(
            "Model %s flagged %d of %d examples as anomalous",
            model_id,
            batch.anomaly_count,
            batch.size,
        )
        return batch

    async def has_trained_model(self) -> bool:
        """Check if a trained model is available.

        Returns:
            True if at least one trained model exists
        """
        latest_id = await self._storage.get_latest_model_id()
        return latest_id is not None

    def invalidate_cache(self) -> None:
        """Forget the cached model."""
        self._cached_model = None

    async def _get_model(self, model_id: str) -> tuple[OneClassSVM, ModelInfo]:
        """Get model and metadata from cache or load from storage.

        Args:
            model_id: Model identifier

        Returns:
            Tuple of (model, model_info)
        """
        if self._cached_model is not None and self._cached_model[0] == model_id:
            return self._cached_model[1], self._cached_model[2]

        model, model_info = await self._storage.load_model(model_id)
        self._cached_model = (model_id, model, model_info)

        _LOGGER.debug(
            "Loaded model %s with %d features: %s",
            model_id, len(model_info.feature_names), model_info.feature_names
        )

        return model, model_info

    @staticmethod
    def _check_feature_contract(request: PredictionRequest, model_info: ModelInfo) -> None:
        """Ensure the request features match those the model was trained on.

        Raises:
            PredictionError: If feature count or names differ
        """
        expected = tuple(model_info.feature_names)
        actual = request.examples.feature_names
        if len(expected) != len(actual):
            raise PredictionError(
                f"Model {model_info.model_id} expects {len(expected)} features, "
                f"got {len(actual)}"
            )
        if expected != actual:
            raise PredictionError(
                f"Model {model_info.model_id} expects features {list(expected)}, "
                f"got {list(actual)}"
            )
