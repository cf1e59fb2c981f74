"""Gaussian anomaly data generator.

Generates synthetic labelled points: expected points from one Gaussian
and anomalous points from a shifted one.
"""

import math
import random
from typing import Sequence

from domain.value_objects import (
    AnomalyLabel,
    ExampleSet,
    GaussianAnomalyConfig,
    LabeledExample,
    default_feature_names,
)


class GaussianAnomalyDataGenerator:
    """Generator for synthetic anomaly detection data.

    Each feature is drawn independently from a normal distribution whose
    mean and variance depend on whether the point is expected or anomalous.
    """

    def __init__(self, seed: int | None = None) -> None:
        """Initialize the generator.

        Args:
            seed: Random seed for reproducibility
        """
        self._random = random.Random(seed)

    def generate(self, config: GaussianAnomalyConfig) -> ExampleSet:
        """Generate a labelled example set.

        A seed on the config takes precedence over the generator's own seed.

        Args:
            config: Sizes, anomaly fraction and distribution parameters

        Returns:
            ExampleSet with config.num_samples shuffled examples
        """
        rng = random.Random(config.seed) if config.seed is not None else self._random
        num_anomalies = config.num_anomalies

        examples: list[LabeledExample] = []
        for _ in range(config.num_samples - num_anomalies):
            examples.append(
                self._sample(rng, config.expected_means, config.expected_variances, AnomalyLabel.EXPECTED)
            )
        for _ in range(num_anomalies):
            examples.append(
                self._sample(rng, config.anomalous_means, config.anomalous_variances, AnomalyLabel.ANOMALOUS)
            )
        rng.shuffle(examples)

        return ExampleSet.from_sequence(
            examples,
            feature_names=default_feature_names(config.num_features),
            description=(
                f"gaussian(num_samples={config.num_samples}, "
                f"anomaly_fraction={config.anomaly_fraction}, seed={config.seed})"
            ),
        )

    @staticmethod
    def _sample(
        rng: random.Random,
        means: Sequence[float],
        variances: Sequence[float],
        label: AnomalyLabel,
    ) -> LabeledExample:
        """Draw a single point."""
        features = tuple(
            rng.gauss(mean, math.sqrt(variance)) for mean, variance in zip(means, variances)
        )
        return LabeledExample(features=features, label=label)

    def generate_batch(
        self,
        configs: Sequence[GaussianAnomalyConfig],
        seeds: Sequence[int] | None = None,
    ) -> list[ExampleSet]:
        """Generate several independent example sets.

        Args:
            configs: Configuration of each set
            seeds: Optional seeds for each set

        Returns:
            List of ExampleSet batches
        """
        if seeds is None:
            seeds = [self._random.randint(0, 10000) for _ in configs]

        batches = []
        for config, seed in zip(configs, seeds):
            generator = GaussianAnomalyDataGenerator(seed=seed)
            batches.append(generator.generate(config))

        return batches
