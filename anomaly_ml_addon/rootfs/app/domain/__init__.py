"""Domain layer for the anomaly detection service.

This package contains the core logic for one-class anomaly detection,
following Domain-Driven Design (DDD) principles.

The domain layer is pure Python with no external dependencies on
Flask, scikit-learn, or any infrastructure concerns.
"""
