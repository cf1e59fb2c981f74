"""Model info value object.

Immutable data structure for ML model metadata.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


def format_duration(seconds: float) -> str:
    """Format an elapsed time as "(HH:MM:SS:mmm)".

    Args:
        seconds: Elapsed time in seconds

    Returns:
        Formatted duration string
    """
    if seconds < 0:
        raise ValueError(f"seconds must be non-negative, got {seconds}")
    total_ms = int(round(seconds * 1000))
    hours, remainder = divmod(total_ms, 3_600_000)
    minutes, remainder = divmod(remainder, 60_000)
    secs, millis = divmod(remainder, 1000)
    return f"({hours:02d}:{minutes:02d}:{secs:02d}:{millis:03d})"


@dataclass(frozen=True)
class ModelInfo:
    """Information about a trained anomaly detection model.

    Attributes:
        model_id: Unique identifier for the model
        created_at: When the model was created
        training_samples: Number of samples used for training
        feature_names: Names of features used by the model
        parameters: SVM parameters the model was trained with
        metrics: Training metrics (support vectors, training time, outlier fraction)
        version: Model version string
    """

    model_id: str
    created_at: datetime
    training_samples: int
    feature_names: tuple[str, ...]
    parameters: dict[str, Any] = field(default_factory=dict)
    metrics: dict[str, float] = field(default_factory=dict)
    version: str = "1.0.0"

    def __post_init__(self) -> None:
        """Validate model info values."""
        if not self.model_id:
            raise ValueError("model_id cannot be empty")
        if self.training_samples < 1:
            raise ValueError(
                f"training_samples must be at least 1, got {self.training_samples}"
            )
        if not self.feature_names:
            raise ValueError("feature_names cannot be empty")

    def to_dict(self) -> dict[str, Any]:
        """Convert model info to a JSON-friendly dictionary."""
        return {
            "model_id": self.model_id,
            "created_at": self.created_at.isoformat(),
            "training_samples": self.training_samples,
            "feature_names": list(self.feature_names),
            "parameters": self.parameters,
            "metrics": self.metrics,
            "version": self.version,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ModelInfo":
        """Build model info from a dictionary produced by to_dict()."""
        return cls(
            model_id=data["model_id"],
            created_at=datetime.fromisoformat(data["created_at"]),
            training_samples=data["training_samples"],
            feature_names=tuple(data["feature_names"]),
            parameters=data.get("parameters", {}),
            metrics=data.get("metrics", {}),
            version=data.get("version", "1.0.0"),
        )
