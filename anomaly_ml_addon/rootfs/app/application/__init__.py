"""Application layer for the anomaly detection service."""
