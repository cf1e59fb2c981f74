"""Labeled example value objects.

Immutable data structures for the points fed to one-class models.
"""

import math
from dataclasses import dataclass
from typing import Sequence

from .anomaly_label import AnomalyLabel


@dataclass(frozen=True)
class LabeledExample:
    """A single feature vector with its ground-truth label.

    Attributes:
        features: Feature values, one per feature name of the owning set
        label: Ground-truth label (EXPECTED when unknown)
    """

    features: tuple[float, ...]
    label: AnomalyLabel = AnomalyLabel.EXPECTED

    def __post_init__(self) -> None:
        """Validate example values."""
        if not self.features:
            raise ValueError("features cannot be empty")
        for value in self.features:
            if not math.isfinite(value):
                raise ValueError(f"features must be finite, got {value}")

    @property
    def is_anomalous(self) -> bool:
        """Return True if the example is labelled anomalous."""
        return self.label is AnomalyLabel.ANOMALOUS


@dataclass(frozen=True)
class ExampleSet:
    """Collection of examples sharing one feature layout.

    Attributes:
        examples: Examples in this set
        feature_names: Names of the features, in column order
        description: Free-text note on where the examples came from
    """

    examples: tuple[LabeledExample, ...]
    feature_names: tuple[str, ...]
    description: str = ""

    def __post_init__(self) -> None:
        """Validate example set."""
        if not self.examples:
            raise ValueError("Example set must contain at least one example")
        if not self.feature_names:
            raise ValueError("feature_names cannot be empty")
        if any(not name for name in self.feature_names):
            raise ValueError("feature names cannot be empty strings")
        if len(set(self.feature_names)) != len(self.feature_names):
            raise ValueError(f"feature names must be unique, got {self.feature_names}")
        expected = len(self.feature_names)
        for index, example in enumerate(self.examples):
            if len(example.features) != expected:
                raise ValueError(
                    f"example {index} has {len(example.features)} features, expected {expected}"
                )

    @classmethod
    def from_sequence(
        cls,
        examples: Sequence[LabeledExample],
        feature_names: Sequence[str] | None = None,
        description: str = "",
    ) -> "ExampleSet":
        """Create an ExampleSet from a sequence of examples.

        Feature names default to A, B, C, ... when not provided.
        """
        if feature_names is None:
            width = len(examples[0].features) if examples else 0
            feature_names = default_feature_names(width)
        return cls(
            examples=tuple(examples),
            feature_names=tuple(feature_names),
            description=description,
        )

    @property
    def size(self) -> int:
        """Return the number of examples."""
        return len(self.examples)

    @property
    def num_features(self) -> int:
        """Return the number of features per example."""
        return len(self.feature_names)

    @property
    def anomaly_count(self) -> int:
        """Return the number of examples labelled anomalous."""
        return sum(1 for example in self.examples if example.is_anomalous)

    @property
    def expected_count(self) -> int:
        """Return the number of examples labelled expected."""
        return self.size - self.anomaly_count

    def feature_matrix(self) -> list[list[float]]:
        """Return the features as a list of rows."""
        return [list(example.features) for example in self.examples]

    def labels(self) -> list[AnomalyLabel]:
        """Return the ground-truth labels in example order."""
        return [example.label for example in self.examples]


def default_feature_names(width: int) -> tuple[str, ...]:
    """Build spreadsheet-style feature names: A, B, ..., Z, AA, AB, ...

    Args:
        width: Number of names to build

    Returns:
        Tuple of feature names
    """
    names = []
    for index in range(width):
        name = ""
        n = index + 1
        while n > 0:
            n, remainder = divmod(n - 1, 26)
            name = chr(ord("A") + remainder) + name
        names.append(name)
    return tuple(names)
