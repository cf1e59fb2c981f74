"""scikit-learn anomaly evaluator adapter.

Infrastructure adapter that implements IAnomalyEvaluator with sklearn.metrics.
"""

import logging

from sklearn.metrics import confusion_matrix, precision_recall_fscore_support

from domain.exceptions import EvaluationError
from domain.interfaces import IAnomalyEvaluator
from domain.value_objects import (
    CLASS_ORDER,
    AnomalyEvaluation,
    AnomalyLabel,
    ExampleSet,
    PredictionBatch,
)

_LOGGER = logging.getLogger(__name__)

_CLASS_NAMES = [label.value for label in CLASS_ORDER]


class SklearnAnomalyEvaluator(IAnomalyEvaluator):
    """Evaluator backed by scikit-learn metrics."""

    def evaluate(
        self, examples: ExampleSet, predictions: PredictionBatch
    ) -> AnomalyEvaluation:
        """Evaluate predictions against the labels of the examples.

        Args:
            examples: Examples carrying ground-truth labels
            predictions: Predictions for the same examples, in the same order

        Returns:
            AnomalyEvaluation with counts and metrics
        """
        if examples.size != predictions.size:
            raise EvaluationError(
                f"Got {predictions.size} predictions for {examples.size} examples"
            )

        y_true = [label.value for label in examples.labels()]
        y_pred = [label.value for label in predictions.labels()]

        # Rows are ground truth, columns predictions, ANOMALOUS first
        (tp, fn), (fp, tn) = confusion_matrix(y_true, y_pred, labels=_CLASS_NAMES)
        precision, recall, f1, _ = precision_recall_fscore_support(
            y_true,
            y_pred,
            pos_label=AnomalyLabel.ANOMALOUS.value,
            average="binary",
            zero_division=0,
        )

        evaluation = AnomalyEvaluation(
            tp=int(tp),
            fp=int(fp),
            tn=int(tn),
            fn=int(fn),
            precision=float(precision),
            recall=float(recall),
            f1=float(f1),
        )
        _LOGGER.info("Evaluated %d predictions of model %s: %s",
                     evaluation.total, predictions.model_id, evaluation)
        return evaluation
