"""One-class SVM trainer adapter.

Infrastructure adapter that implements IAnomalyModelTrainer using scikit-learn.
"""

import logging
import time
import uuid
from datetime import datetime

import numpy as np
from sklearn.svm import OneClassSVM

from domain.exceptions import TrainingError
from domain.interfaces import IAnomalyModelTrainer, IModelStorage
from domain.value_objects import ExampleSet, ModelInfo, SVMParameters

_LOGGER = logging.getLogger(__name__)


def build_one_class_svm(parameters: SVMParameters) -> OneClassSVM:
    """Build an unfitted scikit-learn OneClassSVM from domain parameters."""
    return OneClassSVM(
        kernel=parameters.kernel,
        gamma=parameters.gamma,
        nu=parameters.nu,
        degree=parameters.degree,
        coef0=parameters.coef0,
        tol=parameters.tolerance,
        cache_size=parameters.cache_size_mb,
        shrinking=parameters.shrinking,
    )


class OneClassSVMTrainer(IAnomalyModelTrainer):
    """scikit-learn implementation of the anomaly model trainer.

    The SVM is fit on every example of the training set; labels are
    only used to warn when anomalies leak into it.
    """

    def __init__(
        self,
        storage: IModelStorage,
        parameters: SVMParameters | None = None,
    ) -> None:
        """Initialize the trainer.

        Args:
            storage: Model storage implementation
            parameters: Default SVM parameters (optional)
        """
        self._storage = storage
        self._default_parameters = parameters or SVMParameters()

    async def train(
        self, examples: ExampleSet, parameters: SVMParameters | None = None
    ) -> ModelInfo:
        """Train a new one-class SVM.

        Args:
            examples: Training examples
            parameters: SVM parameters, trainer defaults when omitted

        Returns:
            ModelInfo with details about the trained model
        """
        parameters = parameters or self._default_parameters
        model_id = f"ocsvm_{uuid.uuid4().hex[:8]}"
        _LOGGER.info(
            "Training one-class SVM %s on %d examples (kernel=%s, gamma=%s, nu=%s)",
            model_id,
            examples.size,
            parameters.kernel,
            parameters.gamma,
            parameters.nu,
        )

        if examples.anomaly_count:
            _LOGGER.warning(
                "Training set contains %d examples labelled anomalous; "
                "they are used as if they were expected",
                examples.anomaly_count,
            )

        X = np.asarray(examples.feature_matrix(), dtype=float)
        model = build_one_class_svm(parameters)

        start = time.perf_counter()
        try:
            model.fit(X)
        except (ValueError, MemoryError) as e:
            raise TrainingError(f"Failed to train model {model_id}: {e}") from e
        training_seconds = time.perf_counter() - start

        metrics = {
            "num_support_vectors": int(model.support_vectors_.shape[0]),
            "training_seconds": float(training_seconds),
            "training_outlier_fraction": float(np.mean(model.predict(X) == -1)),
        }
        _LOGGER.info("Model %s trained with metrics: %s", model_id, metrics)

        model_info = ModelInfo(
            model_id=model_id,
            created_at=datetime.now(),
            training_samples=examples.size,
            feature_names=examples.feature_names,
            parameters=parameters.to_dict(),
            metrics=metrics,
        )

        await self._storage.save_model(model_id, model, model_info)

        return model_info

    async def retrain(self, model_id: str, examples: ExampleSet) -> ModelInfo:
        """Train a new model with the parameters of an existing one.

        Args:
            model_id: Identifier of the model whose parameters are reused
            examples: New training examples

        Returns:
            ModelInfo with details about the new model
        """
        _LOGGER.info("Retraining model %s with %d new examples", model_id, examples.size)

        _, info = await self._storage.load_model(model_id)
        if tuple(info.feature_names) != examples.feature_names:
            raise TrainingError(
                f"Model {model_id} was trained on features {list(info.feature_names)}, "
                f"got {list(examples.feature_names)}"
            )

        parameters = SVMParameters.from_dict(info.parameters) if info.parameters else None
        return await self.train(examples, parameters)
