"""Prediction request value object.

Immutable data structure for ML prediction inputs.
"""

from dataclasses import dataclass

from .labeled_example import ExampleSet


@dataclass(frozen=True)
class PredictionRequest:
    """Request for anomaly predictions.

    Attributes:
        examples: Examples to classify (labels are ignored)
        model_id: Optional model identifier (uses latest if not specified)
    """

    examples: ExampleSet
    model_id: str | None = None

    def __post_init__(self) -> None:
        """Validate prediction request values."""
        if self.model_id is not None and not self.model_id:
            raise ValueError("model_id cannot be empty when provided")
