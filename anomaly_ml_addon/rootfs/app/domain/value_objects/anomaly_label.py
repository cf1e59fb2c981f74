"""Anomaly label value object."""

from enum import Enum


class AnomalyLabel(Enum):
    """Ground-truth or predicted class of a single example.

    ``ANOMALOUS`` is the positive class for evaluation purposes.
    """

    EXPECTED = "EXPECTED"
    ANOMALOUS = "ANOMALOUS"

    @classmethod
    def from_name(cls, name: str) -> "AnomalyLabel":
        """Parse a label name case-insensitively.

        Args:
            name: Label name such as "anomalous" or "EXPECTED"

        Returns:
            The matching AnomalyLabel

        Raises:
            ValueError: If the name is not a known label
        """
        try:
            return cls[name.strip().upper()]
        except (KeyError, AttributeError):
            raise ValueError(
                f"label must be one of {[label.value for label in cls]}, got {name!r}"
            ) from None
