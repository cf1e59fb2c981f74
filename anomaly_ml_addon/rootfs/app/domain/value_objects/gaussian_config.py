"""Gaussian data configuration value object.

Describes how synthetic expected and anomalous points are sampled.
"""

from dataclasses import dataclass

DEFAULT_EXPECTED_MEANS = (-1.0, 1.0, -1.0, 1.0)
DEFAULT_ANOMALOUS_MEANS = (4.0, -4.0, 4.0, -4.0)
DEFAULT_VARIANCES = (1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class GaussianAnomalyConfig:
    """Configuration for a synthetic Gaussian anomaly data set.

    Attributes:
        num_samples: Total number of points to generate
        anomaly_fraction: Fraction of points drawn from the anomalous distribution
        expected_means: Per-feature means of expected points
        expected_variances: Per-feature variances of expected points
        anomalous_means: Per-feature means of anomalous points
        anomalous_variances: Per-feature variances of anomalous points
        seed: Random seed for reproducibility (optional)
    """

    num_samples: int
    anomaly_fraction: float = 0.0
    expected_means: tuple[float, ...] = DEFAULT_EXPECTED_MEANS
    expected_variances: tuple[float, ...] = DEFAULT_VARIANCES
    anomalous_means: tuple[float, ...] = DEFAULT_ANOMALOUS_MEANS
    anomalous_variances: tuple[float, ...] = DEFAULT_VARIANCES
    seed: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.num_samples < 1:
            raise ValueError(f"num_samples must be at least 1, got {self.num_samples}")
        if not 0.0 <= self.anomaly_fraction <= 1.0:
            raise ValueError(
                f"anomaly_fraction must be between 0.0 and 1.0, got {self.anomaly_fraction}"
            )
        if not self.expected_means:
            raise ValueError("expected_means cannot be empty")
        width = len(self.expected_means)
        for name in ("expected_variances", "anomalous_means", "anomalous_variances"):
            if len(getattr(self, name)) != width:
                raise ValueError(
                    f"{name} must have {width} values, got {len(getattr(self, name))}"
                )
        for variance in self.expected_variances + self.anomalous_variances:
            if variance <= 0:
                raise ValueError(f"variances must be positive, got {variance}")

    @property
    def num_features(self) -> int:
        """Return the dimensionality of generated points."""
        return len(self.expected_means)

    @property
    def num_anomalies(self) -> int:
        """Return how many anomalous points will be generated."""
        return int(round(self.num_samples * self.anomaly_fraction))
