"""Infrastructure layer for the anomaly detection service.

This package contains implementations of domain interfaces
that interact with external systems (scikit-learn, file storage, HTTP API)
and the command-line walkthrough.
"""
