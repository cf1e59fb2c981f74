"""Application services for anomaly detection.

These services orchestrate domain logic with infrastructure adapters
to fulfill use cases.
"""

from .anomaly_application_service import AnomalyApplicationService

__all__ = [
    "AnomalyApplicationService",
]
