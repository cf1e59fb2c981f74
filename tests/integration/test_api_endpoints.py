"""Integration tests for all API endpoints.

This module tests the Flask API endpoints and validates the full
request/response cycle.
"""

import json
from typing import Any, Dict


def _train(client: Any, payload: Dict[str, Any]) -> Dict[str, Any]:
    response = client.post("/api/v1/train", json=payload)
    assert response.status_code == 200
    return json.loads(response.data)


class TestHealthEndpoint:
    """Tests for the /health endpoint."""

    def test_health_check_returns_healthy(self, client: Any) -> None:
        """Health endpoint should return healthy status."""
        response = client.get("/health")

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["status"] == "healthy"
        assert "timestamp" in data


class TestStatusEndpoint:
    """Tests for the /api/v1/status endpoint."""

    def test_status_returns_service_info(self, client: Any) -> None:
        """Status endpoint should return service information."""
        response = client.get("/api/v1/status")

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["ready"] is False
        assert data["model_count"] == 0


class TestTrainEndpoint:
    """Tests for the /api/v1/train endpoint."""

    def test_train_with_valid_data(self, client: Any, sample_training_data: Dict[str, Any]) -> None:
        """Training with valid data should succeed."""
        data = _train(client, sample_training_data)

        assert data["success"] is True
        assert data["model_id"].startswith("ocsvm_")
        assert data["training_samples"] == 200
        assert data["parameters"]["gamma"] == 0.25
        assert "num_support_vectors" in data["metrics"]

    def test_train_with_empty_data(self, client: Any) -> None:
        """Training with no data should return 400."""
        response = client.post("/api/v1/train", json={})

        assert response.status_code == 400
        assert "error" in json.loads(response.data)

    def test_train_with_ragged_examples(self, client: Any) -> None:
        """Examples of different widths should be rejected."""
        response = client.post(
            "/api/v1/train",
            json={"examples": [{"features": [1.0, 2.0]}, {"features": [1.0]}]},
        )

        assert response.status_code == 400
        assert "expected 2" in json.loads(response.data)["error"]

    def test_train_with_unknown_parameter(
        self, client: Any, sample_training_data: Dict[str, Any]
    ) -> None:
        """Unknown SVM parameters should be rejected."""
        payload = dict(sample_training_data, parameters={"C": 1.0})
        response = client.post("/api/v1/train", json=payload)

        assert response.status_code == 400
        assert "Unknown SVM parameters" in json.loads(response.data)["error"]

    def test_train_with_invalid_label(self, client: Any) -> None:
        """Unknown labels should be rejected."""
        response = client.post(
            "/api/v1/train",
            json={"examples": [{"features": [1.0], "label": "weird"}]},
        )

        assert response.status_code == 400


class TestTrainGeneratedEndpoint:
    """Tests for the /api/v1/train/generated endpoint."""

    def test_train_with_generated_data_custom_samples(self, client: Any) -> None:
        """Training with generated data using a custom sample count."""
        response = client.post(
            "/api/v1/train/generated", json={"num_samples": 200, "seed": 3}
        )

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["success"] is True
        assert data["training_samples"] == 200

    def test_train_with_generated_data_too_few_samples(self, client: Any) -> None:
        """Training with too few generated samples should fail."""
        response = client.post("/api/v1/train/generated", json={"num_samples": 5})

        assert response.status_code == 400
        assert "at least 10" in json.loads(response.data)["error"].lower()

    def test_train_with_generated_data_too_many_samples(self, client: Any) -> None:
        """Training with too many generated samples should fail."""
        response = client.post("/api/v1/train/generated", json={"num_samples": 20000})

        assert response.status_code == 400
        assert "at most 10000" in json.loads(response.data)["error"].lower()

    def test_train_with_generated_data_bad_fraction(self, client: Any) -> None:
        """Anomaly fractions outside [0, 1] should fail."""
        response = client.post(
            "/api/v1/train/generated", json={"num_samples": 100, "anomaly_fraction": 2.0}
        )

        assert response.status_code == 400


class TestPredictEndpoint:
    """Tests for the /api/v1/predict endpoint."""

    def test_predict_without_model(
        self, client: Any, sample_prediction_request: Dict[str, Any]
    ) -> None:
        """Prediction before training should return 503."""
        response = client.post("/api/v1/predict", json=sample_prediction_request)

        assert response.status_code == 503

    def test_predict_labels_examples(
        self,
        client: Any,
        sample_training_data: Dict[str, Any],
        sample_prediction_request: Dict[str, Any],
        anomalous_label: str,
    ) -> None:
        """Prediction should label the far point anomalous."""
        trained = _train(client, sample_training_data)

        response = client.post("/api/v1/predict", json=sample_prediction_request)

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["model_id"] == trained["model_id"]
        assert [p["label"] for p in data["predictions"]] == ["EXPECTED", anomalous_label]
        assert data["anomaly_count"] == 1

    def test_predict_with_wrong_feature_count(
        self, client: Any, sample_training_data: Dict[str, Any]
    ) -> None:
        """Examples that break the feature contract should return 400."""
        _train(client, sample_training_data)

        response = client.post("/api/v1/predict", json={"examples": [{"features": [1.0, 2.0]}]})

        assert response.status_code == 400
        assert "expects 4 features" in json.loads(response.data)["error"]

    def test_predict_with_unknown_model(
        self,
        client: Any,
        sample_training_data: Dict[str, Any],
        sample_prediction_request: Dict[str, Any],
    ) -> None:
        """An unknown model id should return 404."""
        _train(client, sample_training_data)

        payload = dict(sample_prediction_request, model_id="ocsvm_missing")
        response = client.post("/api/v1/predict", json=payload)

        assert response.status_code == 404


class TestEvaluateEndpoint:
    """Tests for the /api/v1/evaluate endpoint."""

    def test_evaluate_returns_confusion_matrix(
        self,
        client: Any,
        sample_training_data: Dict[str, Any],
        sample_evaluation_data: Dict[str, Any],
    ) -> None:
        """Evaluation should return counts, metrics and the rendered table."""
        _train(client, sample_training_data)

        response = client.post("/api/v1/evaluate", json=sample_evaluation_data)

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["tp"] + data["fp"] + data["tn"] + data["fn"] == 100
        assert data["tp"] + data["fn"] == 20
        assert data["recall"] >= 0.95
        assert data["classes"] == ["ANOMALOUS", "EXPECTED"]
        assert data["summary"].startswith("AnomalyEvaluation(")
        assert "Anomalous" in data["confusion_table"]

    def test_evaluate_requires_labels(
        self,
        client: Any,
        sample_training_data: Dict[str, Any],
        sample_prediction_request: Dict[str, Any],
    ) -> None:
        """Unlabelled examples cannot be evaluated."""
        _train(client, sample_training_data)

        response = client.post("/api/v1/evaluate", json=sample_prediction_request)

        assert response.status_code == 400
        assert "missing 'label'" in json.loads(response.data)["error"]


class TestModelEndpoints:
    """Tests for the /api/v1/models endpoints."""

    def test_list_get_and_delete_model(
        self, client: Any, sample_training_data: Dict[str, Any]
    ) -> None:
        """A trained model can be listed, inspected and deleted."""
        model_id = _train(client, sample_training_data)["model_id"]

        listed = json.loads(client.get("/api/v1/models").data)
        assert [m["model_id"] for m in listed["models"]] == [model_id]

        detail = client.get(f"/api/v1/models/{model_id}")
        assert detail.status_code == 200
        assert json.loads(detail.data)["feature_names"] == ["A", "B", "C", "D"]

        deleted = client.delete(f"/api/v1/models/{model_id}")
        assert deleted.status_code == 200
        assert json.loads(deleted.data)["deleted_model_id"] == model_id

        assert client.get(f"/api/v1/models/{model_id}").status_code == 404
        assert client.delete(f"/api/v1/models/{model_id}").status_code == 404

    def test_retrain_model(self, client: Any, sample_training_data: Dict[str, Any]) -> None:
        """Retraining keeps the original parameters under a new id."""
        original = _train(client, sample_training_data)

        response = client.post(
            f"/api/v1/models/{original['model_id']}/retrain",
            json={"examples": sample_training_data["examples"]},
        )

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["retrained_from"] == original["model_id"]
        assert data["model_id"] != original["model_id"]
        assert data["parameters"] == original["parameters"]

    def test_retrain_unknown_model(self, client: Any, sample_training_data: Dict[str, Any]) -> None:
        """Retraining an unknown model should return 404."""
        response = client.post(
            "/api/v1/models/ocsvm_missing/retrain",
            json={"examples": sample_training_data["examples"]},
        )

        assert response.status_code == 404

    def test_retrain_with_different_features(
        self, client: Any, sample_training_data: Dict[str, Any]
    ) -> None:
        """Retraining on a different feature layout should return 400."""
        model_id = _train(client, sample_training_data)["model_id"]

        response = client.post(
            f"/api/v1/models/{model_id}/retrain",
            json={"examples": [{"features": [1.0, 2.0]}, {"features": [2.0, 1.0]}]},
        )

        assert response.status_code == 400
        assert "was trained on features" in json.loads(response.data)["error"]


class TestRequestValidation:
    """Tests for malformed request bodies and identifiers."""

    def test_non_object_bodies_are_rejected(self, client: Any) -> None:
        """JSON bodies that are not objects should return 400 on every POST route."""
        for path in (
            "/api/v1/train",
            "/api/v1/train/generated",
            "/api/v1/predict",
            "/api/v1/evaluate",
            "/api/v1/models/ocsvm_any/retrain",
        ):
            response = client.post(path, json=[1, 2])

            assert response.status_code == 400, path
            assert "JSON object" in json.loads(response.data)["error"]

    def test_examples_must_be_a_list(self, client: Any) -> None:
        """A scalar examples field should return 400."""
        response = client.post("/api/v1/train", json={"examples": 5})

        assert response.status_code == 400

    def test_train_with_non_numeric_parameter(
        self, client: Any, sample_training_data: Dict[str, Any]
    ) -> None:
        """Wrongly typed SVM parameters should return 400."""
        for parameters in ({"nu": "0.1"}, {"gamma": None}):
            payload = dict(sample_training_data, parameters=parameters)
            response = client.post("/api/v1/train", json=payload)

            assert response.status_code == 400
            assert "must be a number" in json.loads(response.data)["error"]

    def test_predict_with_deleted_model(
        self,
        client: Any,
        sample_training_data: Dict[str, Any],
        sample_prediction_request: Dict[str, Any],
    ) -> None:
        """Predicting with the id of a deleted model should return 404."""
        first = _train(client, sample_training_data)["model_id"]
        _train(client, sample_training_data)
        payload = dict(sample_prediction_request, model_id=first)

        assert client.post("/api/v1/predict", json=payload).status_code == 200
        assert client.delete(f"/api/v1/models/{first}").status_code == 200

        response = client.post("/api/v1/predict", json=payload)

        assert response.status_code == 404

    def test_predict_with_path_like_model_id(
        self,
        client: Any,
        sample_training_data: Dict[str, Any],
        sample_prediction_request: Dict[str, Any],
    ) -> None:
        """Model ids that are not plain names should return 404."""
        _train(client, sample_training_data)
        payload = dict(sample_prediction_request, model_id="../../tmp/x")

        response = client.post("/api/v1/predict", json=payload)

        assert response.status_code == 404
