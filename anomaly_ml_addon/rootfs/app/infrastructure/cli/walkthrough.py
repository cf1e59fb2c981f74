"""Anomaly detection walkthrough.

Generates Gaussian data, trains a one-class SVM, predicts a test set and
prints the training time, the evaluation summary and the confusion matrix.
"""

import argparse
import asyncio
import logging
import sys
import tempfile
from pathlib import Path
from typing import Sequence

from application.services import AnomalyApplicationService
from domain.exceptions import AnomalyDetectionError
from domain.services import GaussianAnomalyDataGenerator
from domain.value_objects import (
    SUPPORTED_KERNELS,
    GaussianAnomalyConfig,
    PipelineConfig,
    SVMParameters,
)
from infrastructure.adapters import (
    FileModelStorage,
    OneClassSVMPredictor,
    OneClassSVMTrainer,
    SklearnAnomalyEvaluator,
)
from infrastructure.settings import configure_logging, load_settings

_LOGGER = logging.getLogger(__name__)


def _gamma(value: str) -> float | str:
    if value in ("scale", "auto"):
        return value
    try:
        return float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"gamma must be a number, 'scale' or 'auto', got {value!r}"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    """Build the walkthrough argument parser."""
    parser = argparse.ArgumentParser(
        description="Train and evaluate a one-class SVM on synthetic Gaussian data."
    )
    parser.add_argument("--train-size", type=int, default=2000, help="Number of training examples.")
    parser.add_argument(
        "--train-anomaly-fraction", type=float, default=0.0,
        help="Fraction of anomalous training examples.",
    )
    parser.add_argument("--test-size", type=int, default=2000, help="Number of test examples.")
    parser.add_argument(
        "--test-anomaly-fraction", type=float, default=0.2,
        help="Fraction of anomalous test examples.",
    )
    parser.add_argument("--seed", type=int, default=12345, help="Random seed.")
    parser.add_argument("--kernel", choices=SUPPORTED_KERNELS, default="rbf", help="SVM kernel.")
    parser.add_argument("--gamma", type=_gamma, default=1.0, help="Kernel coefficient.")
    parser.add_argument("--nu", type=float, default=0.1, help="Outlier fraction bound.")
    parser.add_argument(
        "--model-dir", type=Path, default=None,
        help="Where to persist the trained model (temporary directory by default).",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (overrides LOG_LEVEL).")
    return parser


def build_pipeline_config(args: argparse.Namespace) -> PipelineConfig:
    """Translate parsed arguments into a pipeline configuration.

    Raises:
        ValueError: If any value fails domain validation
    """
    return PipelineConfig(
        train_data=GaussianAnomalyConfig(
            num_samples=args.train_size,
            anomaly_fraction=args.train_anomaly_fraction,
            seed=args.seed,
        ),
        test_data=GaussianAnomalyConfig(
            num_samples=args.test_size,
            anomaly_fraction=args.test_anomaly_fraction,
            seed=args.seed + 1,
        ),
        parameters=SVMParameters(kernel=args.kernel, gamma=args.gamma, nu=args.nu),
    )


def build_service(model_dir: Path) -> AnomalyApplicationService:
    """Wire the application service on top of file storage in model_dir."""
    storage = FileModelStorage(model_dir)
    return AnomalyApplicationService(
        trainer=OneClassSVMTrainer(storage),
        predictor=OneClassSVMPredictor(storage),
        evaluator=SklearnAnomalyEvaluator(),
        storage=storage,
        data_generator=GaussianAnomalyDataGenerator(),
    )


async def _run(config: PipelineConfig, model_dir: Path) -> list[str]:
    service = build_service(model_dir)
    report = await service.run_pipeline(config)
    _LOGGER.info("Walkthrough model %s stored in %s", report.model_info.model_id, model_dir)
    return report.render()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the walkthrough and print its report."""
    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(args.log_level or settings.log_level)

    try:
        config = build_pipeline_config(args)
        if args.model_dir is not None:
            blocks = asyncio.run(_run(config, args.model_dir))
        else:
            with tempfile.TemporaryDirectory() as tmpdir:
                blocks = asyncio.run(_run(config, Path(tmpdir)))
    except (ValueError, OSError, AnomalyDetectionError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for block in blocks:
        print(block)
    return 0


if __name__ == "__main__":
    sys.exit(main())
