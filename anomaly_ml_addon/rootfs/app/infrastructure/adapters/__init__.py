"""Infrastructure adapters for anomaly detection.

These adapters implement domain interfaces using external libraries
like scikit-learn and file system storage.
"""

from .file_model_storage import FileModelStorage
from .one_class_svm_predictor import OneClassSVMPredictor
from .one_class_svm_trainer import OneClassSVMTrainer, build_one_class_svm
from .sklearn_anomaly_evaluator import SklearnAnomalyEvaluator

__all__ = [
    "FileModelStorage",
    "OneClassSVMPredictor",
    "OneClassSVMTrainer",
    "SklearnAnomalyEvaluator",
    "build_one_class_svm",
]
