"""Domain services for anomaly detection.

Services contain pure business logic and operate on value objects.
"""

from .anomaly_detection_service import AnomalyDetectionService
from .gaussian_data_generator import GaussianAnomalyDataGenerator

__all__ = [
    "AnomalyDetectionService",
    "GaussianAnomalyDataGenerator",
]
