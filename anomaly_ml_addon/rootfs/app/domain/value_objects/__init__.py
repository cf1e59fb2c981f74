"""Value objects for the anomaly detection domain.

Value objects are immutable data carriers that represent domain concepts.
They have no identity and are compared by their attributes.
"""

from .anomaly_evaluation import CLASS_ORDER, AnomalyEvaluation
from .anomaly_label import AnomalyLabel
from .gaussian_config import GaussianAnomalyConfig
from .labeled_example import ExampleSet, LabeledExample, default_feature_names
from .model_info import ModelInfo, format_duration
from .pipeline import PipelineConfig, PipelineReport
from .prediction_request import PredictionRequest
from .prediction_result import AnomalyPrediction, PredictionBatch
from .svm_parameters import SUPPORTED_KERNELS, SVMParameters

__all__ = [
    "AnomalyEvaluation",
    "AnomalyLabel",
    "AnomalyPrediction",
    "CLASS_ORDER",
    "ExampleSet",
    "GaussianAnomalyConfig",
    "LabeledExample",
    "ModelInfo",
    "PipelineConfig",
    "PipelineReport",
    "PredictionBatch",
    "PredictionRequest",
    "SUPPORTED_KERNELS",
    "SVMParameters",
    "default_feature_names",
    "format_duration",
]
