"""Tests for the AnomalyEvaluation value object."""

import pytest
from domain.value_objects import AnomalyEvaluation


def _evaluation(tp: int = 390, fp: int = 150, tn: int = 1450, fn: int = 10) -> AnomalyEvaluation:
    precision = tp / (tp + fp) if tp + fp else 0.0
    recall = tp / (tp + fn) if tp + fn else 0.0
    f1 = 2 * precision * recall / (precision + recall) if precision + recall else 0.0
    return AnomalyEvaluation(
        tp=tp, fp=fp, tn=tn, fn=fn, precision=precision, recall=recall, f1=f1
    )


class TestAnomalyEvaluation:
    """Tests for AnomalyEvaluation."""

    def test_total_and_accuracy(self) -> None:
        """Test derived totals."""
        evaluation = _evaluation()
        assert evaluation.total == 2000
        assert evaluation.accuracy == pytest.approx((390 + 1450) / 2000)

    def test_confusion_matrix_rows_are_ground_truth(self) -> None:
        """Test confusion matrix layout (rows truth, columns predicted)."""
        assert _evaluation().confusion_matrix() == [[390, 10], [150, 1450]]

    def test_summary_line(self) -> None:
        """Test the one-line evaluation summary."""
        summary = str(_evaluation(tp=1, fp=1, tn=1, fn=1))
        assert summary == (
            "AnomalyEvaluation(tp=1, fp=1, tn=1, fn=1, "
            "precision=0.5000, recall=0.5000, f1=0.5000)"
        )

    def test_confusion_string_lists_both_classes(self) -> None:
        """Test the rendered confusion matrix table."""
        lines = _evaluation().confusion_string().splitlines()
        assert len(lines) == 3
        assert lines[0].split() == ["Anomalous", "Expected"]
        assert lines[1].split() == ["Anomalous", "390", "10"]
        assert lines[2].split() == ["Expected", "150", "1450"]
        assert len({len(line) for line in lines}) == 1

    def test_to_dict(self) -> None:
        """Test JSON-friendly conversion."""
        data = _evaluation().to_dict()
        assert data["tp"] == 390
        assert data["classes"] == ["ANOMALOUS", "EXPECTED"]
        assert data["confusion_matrix"] == [[390, 10], [150, 1450]]

    def test_negative_count_raises_error(self) -> None:
        """Test that counts must be non-negative."""
        with pytest.raises(ValueError, match="fp must be non-negative"):
            AnomalyEvaluation(tp=1, fp=-1, tn=1, fn=0, precision=1.0, recall=1.0, f1=1.0)

    def test_empty_evaluation_raises_error(self) -> None:
        """Test that an evaluation must cover at least one example."""
        with pytest.raises(ValueError, match="at least one example"):
            AnomalyEvaluation(tp=0, fp=0, tn=0, fn=0, precision=0.0, recall=0.0, f1=0.0)

    def test_metric_out_of_range_raises_error(self) -> None:
        """Test that metrics must lie in [0, 1]."""
        with pytest.raises(ValueError, match="precision must be between"):
            AnomalyEvaluation(tp=1, fp=0, tn=0, fn=0, precision=1.5, recall=1.0, f1=1.0)
