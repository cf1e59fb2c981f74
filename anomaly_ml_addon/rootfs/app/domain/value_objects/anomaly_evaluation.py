"""Anomaly evaluation value object.

Immutable record of how predictions compare with ground truth.
"""

from dataclasses import dataclass
from typing import Any

from .anomaly_label import AnomalyLabel

# Row and column order of the confusion matrix
CLASS_ORDER = (AnomalyLabel.ANOMALOUS, AnomalyLabel.EXPECTED)


@dataclass(frozen=True)
class AnomalyEvaluation:
    """Evaluation of anomaly predictions, anomalous being the positive class.

    Attributes:
        tp: Anomalous examples predicted anomalous
        fp: Expected examples predicted anomalous
        tn: Expected examples predicted expected
        fn: Anomalous examples predicted expected
        precision: tp / (tp + fp), 0.0 when undefined
        recall: tp / (tp + fn), 0.0 when undefined
        f1: Harmonic mean of precision and recall, 0.0 when undefined
    """

    tp: int
    fp: int
    tn: int
    fn: int
    precision: float
    recall: float
    f1: float

    def __post_init__(self) -> None:
        """Validate evaluation values."""
        for name in ("tp", "fp", "tn", "fn"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        if self.total == 0:
            raise ValueError("evaluation must cover at least one example")
        for name in ("precision", "recall", "f1"):
            if not 0.0 <= getattr(self, name) <= 1.0:
                raise ValueError(
                    f"{name} must be between 0.0 and 1.0, got {getattr(self, name)}"
                )

    @property
    def total(self) -> int:
        """Return the number of evaluated examples."""
        return self.tp + self.fp + self.tn + self.fn

    @property
    def accuracy(self) -> float:
        """Return the fraction of correctly labelled examples."""
        return (self.tp + self.tn) / self.total

    def confusion_matrix(self) -> list[list[int]]:
        """Return the confusion matrix.

        Rows are ground truth and columns are predictions, both ordered
        ANOMALOUS then EXPECTED.
        """
        return [[self.tp, self.fn], [self.fp, self.tn]]

    def confusion_string(self) -> str:
        """Render the confusion matrix as a text table."""
        names = [label.value.capitalize() for label in CLASS_ORDER]
        matrix = self.confusion_matrix()
        width = max(
            max(len(name) for name in names),
            max(len(str(count)) for row in matrix for count in row),
        ) + 2
        lines = [" " * width + "".join(name.rjust(width) for name in names)]
        for name, row in zip(names, matrix):
            lines.append(name.ljust(width) + "".join(str(count).rjust(width) for count in row))
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert the evaluation to a JSON-friendly dictionary."""
        return {
            "tp": self.tp,
            "fp": self.fp,
            "tn": self.tn,
            "fn": self.fn,
            "precision": self.precision,
            "recall": self.recall,
            "f1": self.f1,
            "accuracy": self.accuracy,
            "confusion_matrix": self.confusion_matrix(),
            "classes": [label.value for label in CLASS_ORDER],
        }

    def __str__(self) -> str:
        return (
            f"AnomalyEvaluation(tp={self.tp}, fp={self.fp}, tn={self.tn}, fn={self.fn}, "
            f"precision={self.precision:.4f}, recall={self.recall:.4f}, f1={self.f1:.4f})"
        )
