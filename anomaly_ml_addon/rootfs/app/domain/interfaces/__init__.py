"""Domain interfaces for anomaly detection.

Interfaces define contracts between the domain and infrastructure layers.
The domain depends on these abstractions, not on concrete implementations.
"""

from .anomaly_evaluator import IAnomalyEvaluator
from .anomaly_model_predictor import IAnomalyModelPredictor
from .anomaly_model_trainer import IAnomalyModelTrainer
from .model_storage import IModelStorage

__all__ = [
    "IAnomalyEvaluator",
    "IAnomalyModelPredictor",
    "IAnomalyModelTrainer",
    "IModelStorage",
]
