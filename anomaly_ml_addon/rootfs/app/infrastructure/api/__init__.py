"""HTTP API for the anomaly detection service."""
