"""Runtime settings read from the environment."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    """Service settings.

    Attributes:
        log_level: Logging level name
        model_path: Directory where trained models are persisted
        api_host: Interface the HTTP API binds to
        api_port: Port the HTTP API listens on
    """

    log_level: str = "INFO"
    model_path: Path = Path("data/models")
    api_host: str = "0.0.0.0"
    api_port: int = 5000


def load_settings() -> Settings:
    """Build settings from LOG_LEVEL, MODEL_PERSISTENCE_PATH, API_HOST and API_PORT."""
    port_raw = os.getenv("API_PORT", "5000")
    try:
        api_port = int(port_raw)
    except ValueError:
        raise ValueError(f"API_PORT must be an integer, got {port_raw!r}") from None

    return Settings(
        log_level=os.getenv("LOG_LEVEL", "info").upper(),
        model_path=Path(os.getenv("MODEL_PERSISTENCE_PATH", "data/models")),
        api_host=os.getenv("API_HOST", "0.0.0.0"),
        api_port=api_port,
    )


def configure_logging(level_name: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
