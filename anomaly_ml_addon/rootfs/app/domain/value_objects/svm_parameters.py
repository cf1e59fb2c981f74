"""SVM parameters value object.

Hyperparameters handed to the one-class SVM wrapper.
"""

from dataclasses import asdict, dataclass, fields
from typing import Any

SUPPORTED_KERNELS = ("linear", "poly", "rbf", "sigmoid")
GAMMA_HEURISTICS = ("scale", "auto")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class SVMParameters:
    """Configuration of a one-class SVM.

    Attributes:
        kernel: Kernel type (linear, poly, rbf, sigmoid)
        gamma: Kernel coefficient, or "scale"/"auto" heuristics
        nu: Upper bound on the training outlier fraction (0 < nu <= 1)
        degree: Polynomial degree (poly kernel only)
        coef0: Independent kernel term (poly and sigmoid kernels)
        tolerance: Stopping tolerance of the solver
        cache_size_mb: Kernel cache size in megabytes
        shrinking: Whether to use the shrinking heuristic
    """

    kernel: str = "rbf"
    gamma: float | str = 1.0
    nu: float = 0.1
    degree: int = 3
    coef0: float = 0.0
    tolerance: float = 1e-3
    cache_size_mb: float = 200.0
    shrinking: bool = True

    def __post_init__(self) -> None:
        """Validate SVM parameters."""
        for name in ("nu", "degree", "coef0", "tolerance", "cache_size_mb"):
            if not _is_number(getattr(self, name)):
                raise ValueError(f"{name} must be a number, got {getattr(self, name)!r}")
        if not isinstance(self.degree, int):
            raise ValueError(f"degree must be an integer, got {self.degree!r}")
        if not isinstance(self.shrinking, bool):
            raise ValueError(f"shrinking must be a boolean, got {self.shrinking!r}")
        if self.kernel not in SUPPORTED_KERNELS:
            raise ValueError(f"kernel must be one of {SUPPORTED_KERNELS}, got {self.kernel!r}")
        if isinstance(self.gamma, str):
            if self.gamma not in GAMMA_HEURISTICS:
                raise ValueError(
                    f"gamma must be a positive number or one of {GAMMA_HEURISTICS}, got {self.gamma!r}"
                )
        elif not _is_number(self.gamma):
            raise ValueError(f"gamma must be a number, got {self.gamma!r}")
        elif self.gamma <= 0:
            raise ValueError(f"gamma must be positive, got {self.gamma}")
        if not 0 < self.nu <= 1:
            raise ValueError(f"nu must be in (0, 1], got {self.nu}")
        if self.degree < 1:
            raise ValueError(f"degree must be at least 1, got {self.degree}")
        if self.tolerance <= 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")
        if self.cache_size_mb <= 0:
            raise ValueError(f"cache_size_mb must be positive, got {self.cache_size_mb}")

    def to_dict(self) -> dict[str, Any]:
        """Convert parameters to a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SVMParameters":
        """Build parameters from a dictionary, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown SVM parameters: {', '.join(sorted(unknown))}")
        return cls(**data)
