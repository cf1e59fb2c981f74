"""Pipeline value objects.

Configuration and outcome of the generate, train, predict, evaluate walkthrough.
"""

from dataclasses import dataclass, field

from .anomaly_evaluation import AnomalyEvaluation
from .gaussian_config import GaussianAnomalyConfig
from .model_info import ModelInfo, format_duration
from .prediction_result import PredictionBatch
from .svm_parameters import SVMParameters


@dataclass(frozen=True)
class PipelineConfig:
    """Configuration of an end-to-end anomaly detection run.

    Attributes:
        train_data: How to sample the training set
        test_data: How to sample the test set
        parameters: One-class SVM parameters
    """

    train_data: GaussianAnomalyConfig = field(
        default_factory=lambda: GaussianAnomalyConfig(num_samples=2000, anomaly_fraction=0.0)
    )
    test_data: GaussianAnomalyConfig = field(
        default_factory=lambda: GaussianAnomalyConfig(num_samples=2000, anomaly_fraction=0.2)
    )
    parameters: SVMParameters = field(default_factory=SVMParameters)

    def __post_init__(self) -> None:
        """Validate that train and test sets share a feature layout."""
        if self.train_data.num_features != self.test_data.num_features:
            raise ValueError(
                f"train and test data must have the same number of features, got "
                f"{self.train_data.num_features} and {self.test_data.num_features}"
            )


@dataclass(frozen=True)
class PipelineReport:
    """Outcome of an end-to-end anomaly detection run.

    Attributes:
        model_info: Metadata of the trained model
        evaluation: Evaluation of the test predictions
        training_seconds: Wall time spent training
        predictions: Test set predictions
    """

    model_info: ModelInfo
    evaluation: AnomalyEvaluation
    training_seconds: float
    predictions: PredictionBatch

    @property
    def timing_line(self) -> str:
        """Return the training time line."""
        return f"Training took {format_duration(self.training_seconds)}"

    def render(self) -> list[str]:
        """Return the report blocks in print order."""
        return [
            self.timing_line,
            str(self.evaluation),
            self.evaluation.confusion_string(),
        ]
