"""Pytest fixtures for integration tests.

This module provides fixtures for testing the Flask API against a
temporary model directory.
"""

import tempfile
from pathlib import Path
from typing import Any, Generator
from unittest.mock import patch

import pytest

from application.services import AnomalyApplicationService
from domain.services import GaussianAnomalyDataGenerator
from domain.value_objects import AnomalyLabel, GaussianAnomalyConfig
from infrastructure.adapters import (
    FileModelStorage,
    OneClassSVMPredictor,
    OneClassSVMTrainer,
    SklearnAnomalyEvaluator,
)


@pytest.fixture
def temp_model_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for model storage."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def ml_service(temp_model_dir: Path) -> AnomalyApplicationService:
    """Create an AnomalyApplicationService on temporary storage."""
    storage = FileModelStorage(temp_model_dir)
    return AnomalyApplicationService(
        trainer=OneClassSVMTrainer(storage),
        predictor=OneClassSVMPredictor(storage),
        evaluator=SklearnAnomalyEvaluator(),
        storage=storage,
    )


@pytest.fixture
def flask_app(ml_service: AnomalyApplicationService, temp_model_dir: Path) -> Any:
    """Create a Flask test app with the temporary service.

    This fixture patches the global ml_service in the server module.
    """
    with patch.dict("os.environ", {"MODEL_PERSISTENCE_PATH": str(temp_model_dir)}):
        import infrastructure.api.server as server_module

        with patch.object(server_module, "ml_service", ml_service):
            app = server_module.app
            app.config["TESTING"] = True
            yield app


@pytest.fixture
def client(flask_app: Any) -> Any:
    """Create a Flask test client."""
    return flask_app.test_client()


def _payload(config: GaussianAnomalyConfig, with_labels: bool) -> list[dict[str, Any]]:
    examples = GaussianAnomalyDataGenerator().generate(config)
    payload = []
    for example in examples.examples:
        item: dict[str, Any] = {"features": list(example.features)}
        if with_labels:
            item["label"] = example.label.value
        payload.append(item)
    return payload


@pytest.fixture
def sample_training_data() -> dict[str, Any]:
    """Training payload of expected-only examples."""
    return {
        "examples": _payload(GaussianAnomalyConfig(num_samples=200, seed=1), with_labels=False),
        "parameters": {"kernel": "rbf", "gamma": 0.25, "nu": 0.1},
    }


@pytest.fixture
def sample_evaluation_data() -> dict[str, Any]:
    """Labelled payload with 20% anomalies."""
    return {
        "examples": _payload(
            GaussianAnomalyConfig(num_samples=100, anomaly_fraction=0.2, seed=2), with_labels=True
        ),
    }


@pytest.fixture
def sample_prediction_request() -> dict[str, Any]:
    """Prediction payload with one expected and one anomalous point."""
    return {
        "examples": [
            {"features": [-1.0, 1.0, -1.0, 1.0]},
            {"features": [4.0, -4.0, 4.0, -4.0]},
        ]
    }


@pytest.fixture
def anomalous_label() -> str:
    """Wire name of the anomalous label."""
    return AnomalyLabel.ANOMALOUS.value
