"""Flask HTTP API Server.

HTTP API for training, prediction and evaluation of one-class
anomaly detection models.
"""

import asyncio
import logging
import sys
from datetime import datetime
from functools import wraps
from pathlib import Path
from typing import Any, Callable

from flask import Flask, Response, jsonify, request

# Add app directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from application.services import AnomalyApplicationService
from domain.exceptions import ModelNotFoundError, PredictionError, TrainingError
from domain.value_objects import (
    AnomalyLabel,
    ExampleSet,
    GaussianAnomalyConfig,
    LabeledExample,
    ModelInfo,
    PredictionRequest,
    SVMParameters,
)
from infrastructure.adapters import (
    FileModelStorage,
    OneClassSVMPredictor,
    OneClassSVMTrainer,
    SklearnAnomalyEvaluator,
)
from infrastructure.settings import configure_logging, load_settings

settings = load_settings()
configure_logging(settings.log_level)
_LOGGER = logging.getLogger(__name__)

MIN_GENERATED_SAMPLES = 10
MAX_GENERATED_SAMPLES = 10000

# Create Flask app
app = Flask(__name__)

# Initialize services
model_path = settings.model_path
storage = FileModelStorage(model_path)
trainer = OneClassSVMTrainer(storage)
predictor = OneClassSVMPredictor(storage)
evaluator = SklearnAnomalyEvaluator()

ml_service = AnomalyApplicationService(trainer, predictor, evaluator, storage)


def async_route(f: Callable) -> Callable:
    """Decorator to run async functions in Flask routes.

    Uses asyncio.run() for proper event loop lifecycle management.
    """
    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return asyncio.run(f(*args, **kwargs))
    return wrapper


def _parse_examples(data: dict[str, Any], require_labels: bool) -> ExampleSet:
    """Build an ExampleSet from a JSON body.

    Raises:
        ValueError: If examples are missing or malformed
    """
    raw_examples = data.get("examples")
    if not raw_examples:
        raise ValueError("No examples provided")
    if not isinstance(raw_examples, list):
        raise ValueError("examples must be a list")

    examples = []
    for index, raw in enumerate(raw_examples):
        if not isinstance(raw, dict) or "features" not in raw:
            raise ValueError(f"Example {index} is missing 'features'")
        label_raw = raw.get("label")
        if label_raw is None:
            if require_labels:
                raise ValueError(f"Example {index} is missing 'label'")
            label = AnomalyLabel.EXPECTED
        else:
            label = AnomalyLabel.from_name(label_raw)
        try:
            features = tuple(float(value) for value in raw["features"])
        except (TypeError, ValueError):
            raise ValueError(f"Example {index} has non-numeric features") from None
        examples.append(LabeledExample(features=features, label=label))

    return ExampleSet.from_sequence(examples, feature_names=data.get("feature_names"))


def _parse_parameters(data: dict[str, Any]) -> SVMParameters | None:
    """Read optional SVM parameters from a JSON body."""
    raw = data.get("parameters")
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError("parameters must be an object")
    return SVMParameters.from_dict(raw)


def _model_payload(model_info: ModelInfo) -> dict[str, Any]:
    return {
        "model_id": model_info.model_id,
        "created_at": model_info.created_at.isoformat(),
        "training_samples": model_info.training_samples,
        "parameters": model_info.parameters,
        "metrics": model_info.metrics,
        "version": model_info.version,
    }


@app.route("/health", methods=["GET"])
def health_check() -> Response:
    """Health check endpoint."""
    return jsonify({
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
    })


@app.route("/api/v1/status", methods=["GET"])
@async_route
async def get_status() -> Response:
    """Get anomaly detection service status."""
    try:
        status = await ml_service.get_status()
        return jsonify(status)
    except Exception as e:
        _LOGGER.exception("Error getting status")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/train", methods=["POST"])
@async_route
async def train_model() -> Response:
    """Train a model with provided examples.

    Request body:
    {
        "examples": [{"features": [float, ...], "label": str (optional)}, ...],
        "feature_names": [str, ...] (optional),
        "parameters": {"kernel": str, "gamma": float|str, "nu": float, ...} (optional)
    }
    """
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({"error": "No data provided"}), 400
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        examples = _parse_examples(data, require_labels=False)
        parameters = _parse_parameters(data)
        model_info = await ml_service.train_with_data(examples, parameters)

        return jsonify({"success": True, **_model_payload(model_info)})

    except ValueError as e:
        _LOGGER.warning("Invalid training data: %s", e)
        return jsonify({"error": f"Invalid data: {e}"}), 400
    except Exception as e:
        _LOGGER.exception("Error training model")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/train/generated", methods=["POST"])
@async_route
async def train_with_generated_data() -> Response:
    """Train a model with synthetic Gaussian data.

    Request body (optional):
    {
        "num_samples": int (default: 2000),
        "anomaly_fraction": float (default: 0.0),
        "seed": int (optional),
        "parameters": {...} (optional)
    }
    """
    try:
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400
        num_samples = int(data.get("num_samples", 2000))

        if num_samples < MIN_GENERATED_SAMPLES:
            return jsonify({"error": f"num_samples must be at least {MIN_GENERATED_SAMPLES}"}), 400
        if num_samples > MAX_GENERATED_SAMPLES:
            return jsonify({"error": f"num_samples must be at most {MAX_GENERATED_SAMPLES}"}), 400

        seed = data.get("seed")
        config = GaussianAnomalyConfig(
            num_samples=num_samples,
            anomaly_fraction=float(data.get("anomaly_fraction", 0.0)),
            seed=int(seed) if seed is not None else None,
        )
        model_info = await ml_service.train_with_generated_data(config, _parse_parameters(data))

        return jsonify({"success": True, **_model_payload(model_info)})

    except (TypeError, ValueError) as e:
        _LOGGER.warning("Invalid generated training request: %s", e)
        return jsonify({"error": f"Invalid data: {e}"}), 400
    except Exception as e:
        _LOGGER.exception("Error training with generated data")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/predict", methods=["POST"])
@async_route
async def predict() -> Response:
    """Label examples as expected or anomalous.

    Request body:
    {
        "examples": [{"features": [float, ...]}, ...],
        "feature_names": [str, ...] (optional),
        "model_id": str (optional - latest model when omitted)
    }
    """
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({"error": "No data provided"}), 400
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        if not await ml_service.is_ready():
            return jsonify({
                "error": "No trained model available. Train a model first.",
            }), 503

        prediction_request = PredictionRequest(
            examples=_parse_examples(data, require_labels=False),
            model_id=data.get("model_id"),
        )
        batch = await ml_service.predict(prediction_request)

        return jsonify({
            "success": True,
            "model_id": batch.model_id,
            "timestamp": batch.timestamp.isoformat(),
            "anomaly_count": batch.anomaly_count,
            "predictions": [
                {"label": p.label.value, "score": p.score} for p in batch.predictions
            ],
        })

    except ModelNotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except (ValueError, PredictionError) as e:
        _LOGGER.warning("Invalid prediction request: %s", e)
        return jsonify({"error": f"Invalid data: {e}"}), 400
    except Exception as e:
        _LOGGER.exception("Error making prediction")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/evaluate", methods=["POST"])
@async_route
async def evaluate() -> Response:
    """Evaluate a model on labelled examples.

    Request body:
    {
        "examples": [{"features": [float, ...], "label": "ANOMALOUS"|"EXPECTED"}, ...],
        "feature_names": [str, ...] (optional),
        "model_id": str (optional - latest model when omitted)
    }
    """
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({"error": "No data provided"}), 400
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        if not await ml_service.is_ready():
            return jsonify({
                "error": "No trained model available. Train a model first.",
            }), 503

        examples = _parse_examples(data, require_labels=True)
        batch, evaluation = await ml_service.evaluate(examples, data.get("model_id"))

        return jsonify({
            "success": True,
            "model_id": batch.model_id,
            "summary": str(evaluation),
            "confusion_table": evaluation.confusion_string(),
            **evaluation.to_dict(),
        })

    except ModelNotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except (ValueError, PredictionError) as e:
        _LOGGER.warning("Invalid evaluation request: %s", e)
        return jsonify({"error": f"Invalid data: {e}"}), 400
    except Exception as e:
        _LOGGER.exception("Error evaluating model")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/models", methods=["GET"])
@async_route
async def list_models() -> Response:
    """List all available models."""
    try:
        models = await ml_service.list_models()
        return jsonify({"models": [_model_payload(m) for m in models]})
    except Exception as e:
        _LOGGER.exception("Error listing models")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/models/<model_id>", methods=["GET"])
@async_route
async def get_model(model_id: str) -> Response:
    """Get information about a specific model."""
    try:
        model_info = await ml_service.get_model_info(model_id)
        if model_info is None:
            return jsonify({"error": "Model not found"}), 404

        return jsonify({
            **_model_payload(model_info),
            "feature_names": list(model_info.feature_names),
        })
    except Exception as e:
        _LOGGER.exception("Error getting model info")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/models/<model_id>/retrain", methods=["POST"])
@async_route
async def retrain_model(model_id: str) -> Response:
    """Train a new model with the parameters of an existing one.

    Request body:
    {
        "examples": [{"features": [float, ...]}, ...],
        "feature_names": [str, ...] (optional)
    }
    """
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({"error": "No data provided"}), 400
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        examples = _parse_examples(data, require_labels=False)
        model_info = await ml_service.retrain(model_id, examples)

        return jsonify({"success": True, "retrained_from": model_id, **_model_payload(model_info)})

    except ModelNotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except (ValueError, TrainingError) as e:
        _LOGGER.warning("Invalid retraining request: %s", e)
        return jsonify({"error": f"Invalid data: {e}"}), 400
    except Exception as e:
        _LOGGER.exception("Error retraining model")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/models/<model_id>", methods=["DELETE"])
@async_route
async def delete_model(model_id: str) -> Response:
    """Delete a model."""
    try:
        await ml_service.delete_model(model_id)
        return jsonify({"success": True, "deleted_model_id": model_id})
    except ModelNotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except Exception as e:
        _LOGGER.exception("Error deleting model")
        return jsonify({"error": str(e)}), 500


def main() -> None:
    """Main entry point for the server."""
    _LOGGER.info(
        "Starting anomaly detection API server on %s:%d", settings.api_host, settings.api_port
    )
    _LOGGER.info("Model storage path: %s", model_path)

    app.run(host=settings.api_host, port=settings.api_port, debug=False)


if __name__ == "__main__":
    main()
