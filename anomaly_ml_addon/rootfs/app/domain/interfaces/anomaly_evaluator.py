"""Anomaly evaluator interface.

Contract for comparing predictions with ground truth.
"""

from abc import ABC, abstractmethod

from domain.value_objects import AnomalyEvaluation, ExampleSet, PredictionBatch


class IAnomalyEvaluator(ABC):
    """Contract for anomaly evaluation operations."""

    @abstractmethod
    def evaluate(
        self, examples: ExampleSet, predictions: PredictionBatch
    ) -> AnomalyEvaluation:
        """Evaluate predictions against the labels of the examples.

        Args:
            examples: Examples carrying ground-truth labels
            predictions: Predictions for the same examples, in the same order

        Returns:
            AnomalyEvaluation with counts and metrics

        Raises:
            EvaluationError: If the predictions don't match the examples
        """
        pass
